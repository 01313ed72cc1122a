"""Account schemas and the response envelope."""

from pydantic import BaseModel, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class ApiResponse(BaseModel):
    """Envelope shared by every response. ``status`` repeats the HTTP status."""

    status: int
    message: str


class RegisteredAccount(BaseModel):
    email: str
    password: str


class RegisterResponse(ApiResponse):
    """Registration response echoing the submitted credentials."""

    data: RegisteredAccount


class AccountEmail(BaseModel):
    email: str


class MeResponse(ApiResponse):
    """Current account response."""

    data: AccountEmail
