"""Pydantic schemas for API requests and responses."""

from codetrack.schemas.accounts import (
    AccountEmail,
    ApiResponse,
    MeResponse,
    RegisteredAccount,
    RegisterResponse,
    UserLogin,
    UserRegister,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "ApiResponse",
    "RegisteredAccount",
    "RegisterResponse",
    "AccountEmail",
    "MeResponse",
]
