# dentalcare/schemas/payments/payment.py
from pydantic import AliasChoices, BaseModel, Field
from typing import Optional


class PaymentIntentRequest(BaseModel):
    # The client posts the whole booking; only the price matters here
    price: float = Field(gt=0, allow_inf_nan=False)


class PaymentIntentResponse(BaseModel):
    clientSecret: str


class PaymentCreate(BaseModel):
    bookingId: str = Field(min_length=1)
    transactionId: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0, allow_inf_nan=False, validation_alias=AliasChoices("price", "amount"))
    email: Optional[str] = None
