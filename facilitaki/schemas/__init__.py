"""Pydantic schemas for API requests and responses."""

from facilitaki.schemas.auth import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    TokenCheckResponse,
)
from facilitaki.schemas.contact import ContactCreate
from facilitaki.schemas.order import (
    OrderCreate,
    OrderCreatedResponse,
    OrderListResponse,
    OrderResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "AccountResponse",
    "TokenCheckResponse",
    "MessageResponse",
    "ContactCreate",
    "OrderCreate",
    "OrderResponse",
    "OrderCreatedResponse",
    "OrderListResponse",
]
