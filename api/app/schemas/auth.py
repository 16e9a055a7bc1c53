"""
Auth Schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class SignUpRequest(BaseModel):
    """Schema for user registration"""
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=100)
    full_name: Optional[str] = Field(None, max_length=100)
    name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=15)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class PhoneVerificationRequest(BaseModel):
    token: str = ""
