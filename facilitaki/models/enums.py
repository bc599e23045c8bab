"""Enums for model fields."""

from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle of a service order."""

    PENDING = "pendente"
    PAID = "pago"
    IN_PROGRESS = "em_andamento"
    COMPLETED = "concluido"
    CANCELLED = "cancelado"
