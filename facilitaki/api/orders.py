"""Order API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from facilitaki.api.dependencies import get_current_account, get_order_service
from facilitaki.models.account import Account
from facilitaki.schemas.order import (
    OrderCreate,
    OrderCreatedResponse,
    OrderListResponse,
    OrderResponse,
)
from facilitaki.services.order_service import OrderService

router = APIRouter(prefix="/api", tags=["orders"])


@router.post("/pedidos", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    order_data: OrderCreate,
    current_account: Annotated[Account, Depends(get_current_account)],
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Place a new order for the current customer."""
    order = service.create_order(current_account, order_data)
    return OrderCreatedResponse(
        mensagem="Pedido registrado com sucesso",
        pedido=OrderResponse.model_validate(order),
    )


@router.get("/meus-pedidos", response_model=OrderListResponse)
def get_my_orders(
    current_account: Annotated[Account, Depends(get_current_account)],
    service: Annotated[OrderService, Depends(get_order_service)],
):
    """Get the current customer's orders, newest first."""
    orders = service.list_orders(current_account)
    return OrderListResponse(pedidos=[OrderResponse.model_validate(order) for order in orders])
