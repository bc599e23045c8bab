"""Order schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderCreate(BaseModel):
    """Create an order. Keys follow the frontend's camelCase payload."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    cliente: str | None = Field(None, max_length=255)
    telefone: str | None = Field(None, max_length=50)
    instituicao: str | None = Field(None, max_length=255)
    curso: str | None = Field(None, max_length=255)
    cadeira: str | None = Field(None, max_length=255)
    tema: str | None = Field(None, max_length=255)
    descricao: str | None = Field(None, max_length=5000)
    prazo: date | None = None
    plano: str = Field(..., min_length=1, max_length=100)
    nome_plano: str = Field(..., alias="nomePlano", min_length=1, max_length=255)
    preco: int = Field(..., ge=0)
    metodo_pagamento: str = Field(..., alias="metodoPagamento", min_length=1, max_length=50)

    @field_validator(
        "cliente", "telefone", "instituicao", "curso", "cadeira", "tema", "descricao", "prazo",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """Empty form inputs arrive as empty strings."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class OrderResponse(BaseModel):
    """Order as shown on the customer dashboard."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    cliente: str = Field(validation_alias="customer_name")
    telefone: str = Field(validation_alias="phone")
    instituicao: str | None = Field(validation_alias="institution")
    curso: str | None = Field(validation_alias="course")
    cadeira: str | None = Field(validation_alias="subject")
    tema: str | None = Field(validation_alias="topic")
    descricao: str | None = Field(validation_alias="description")
    prazo: date | None = Field(validation_alias="deadline")
    plano: str = Field(validation_alias="plan")
    nome_plano: str = Field(validation_alias="plan_name")
    preco: int = Field(validation_alias="price")
    metodo_pagamento: str = Field(validation_alias="payment_method")
    status: str
    data_pedido: datetime = Field(validation_alias="created_at")


class OrderCreatedResponse(BaseModel):
    mensagem: str
    pedido: OrderResponse


class OrderListResponse(BaseModel):
    pedidos: list[OrderResponse]
