from pydantic import EmailStr, Field

from .base import CamelModel
from .user_dto import UserResponse


class SignupRequest(CamelModel):
    """DTO for user signup request"""
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)


class LoginRequest(CamelModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)


class SignupResponse(CamelModel):
    """DTO for signup response"""
    message: str
    user: UserResponse


class LoginResponse(CamelModel):
    """DTO for authentication token response"""
    access_token: str
    user: UserResponse
