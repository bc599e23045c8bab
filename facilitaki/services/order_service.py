"""Order service for placing and listing customer orders."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from facilitaki.errors import PersistenceError
from facilitaki.models.account import Account
from facilitaki.models.enums import OrderStatus
from facilitaki.models.order import Order
from facilitaki.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


class OrderService:
    """Service for order-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def create_order(self, account: Account, order_data: OrderCreate) -> Order:
        """Place an order for ``account``.

        Contact fields left blank fall back to the account's own name and phone.
        New orders always start as pending, whatever status the client sent.
        """
        order = Order(
            account_id=account.id,
            customer_name=order_data.cliente or account.name,
            phone=order_data.telefone or account.phone,
            institution=order_data.instituicao,
            course=order_data.curso,
            subject=order_data.cadeira,
            topic=order_data.tema,
            description=order_data.descricao,
            deadline=order_data.prazo,
            plan=order_data.plano,
            plan_name=order_data.nome_plano,
            price=order_data.preco,
            payment_method=order_data.metodo_pagamento,
            status=OrderStatus.PENDING.value,
        )
        try:
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to create order for account %s", account.id)
            detail = str(getattr(exc, "orig", None) or exc)
            raise PersistenceError("Erro ao criar pedido", detail=detail) from exc

        logger.info("Account %s placed order %s (%s)", account.id, order.id, order.plan)
        return order

    def list_orders(self, account: Account) -> list[Order]:
        """Get the account's orders, newest first."""
        try:
            return (
                self.db.query(Order)
                .filter(Order.account_id == account.id)
                .order_by(Order.created_at.desc(), Order.id.desc())
                .all()
            )
        except SQLAlchemyError as exc:
            logger.exception("Failed to list orders for account %s", account.id)
            raise PersistenceError("Erro ao buscar pedidos") from exc
