from fastapi import APIRouter, Depends, HTTPException
import logging

from ..application.services.payment_service import PaymentService
from ..dependencies import get_payment_service
from ..schemas.common.common import InsertResult
from ..schemas.payments.payment import PaymentCreate, PaymentIntentRequest, PaymentIntentResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["Payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(
    booking: PaymentIntentRequest,
    payment_service: PaymentService = Depends(get_payment_service),
):
    try:
        return PaymentIntentResponse(clientSecret=payment_service.create_intent(booking.price))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating payment intent: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create payment intent")


@router.post("/payments", response_model=InsertResult, response_model_exclude_none=True)
def record_payment(
    payment: PaymentCreate,
    payment_service: PaymentService = Depends(get_payment_service),
):
    try:
        saved = payment_service.confirm(
            booking_id=payment.bookingId,
            transaction_id=payment.transactionId,
            amount=payment.price,
            email=payment.email,
        )
        return InsertResult(acknowledged=True, insertedId=saved.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error recording payment for booking {payment.bookingId}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to record payment")
