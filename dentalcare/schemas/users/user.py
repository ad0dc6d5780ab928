# dentalcare/schemas/users/user.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class UserCreate(BaseModel):
    email: str = Field(min_length=3, max_length=100)
    name: Optional[str] = Field(default=None, max_length=100)


class UserResponse(UserCreate):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    role: Optional[str] = None


class AdminStatusResponse(BaseModel):
    isAdmin: bool


class AccessTokenResponse(BaseModel):
    accessToken: str
