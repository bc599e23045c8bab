"""SQLAlchemy models."""

from facilitaki.models.account import Account
from facilitaki.models.contact_message import ContactMessage
from facilitaki.models.enums import OrderStatus
from facilitaki.models.order import Order

__all__ = [
    "Account",
    "Order",
    "OrderStatus",
    "ContactMessage",
]
