"""Order model."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from facilitaki.database import Base
from facilitaki.models.enums import OrderStatus


class Order(Base):
    """Service order (pedido) placed by an account."""

    __tablename__ = "pedidos"

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(
        "cliente_id", Integer, ForeignKey("clientes.id"), nullable=False, index=True
    )
    customer_name = Column("cliente", String(255), nullable=False)
    phone = Column("telefone", String(50), nullable=False)
    institution = Column("instituicao", String(255), nullable=True)
    course = Column("curso", String(255), nullable=True)
    subject = Column("cadeira", String(255), nullable=True)
    topic = Column("tema", String(255), nullable=True)
    description = Column("descricao", Text, nullable=True)
    deadline = Column("prazo", Date, nullable=True)
    plan = Column("plano", String(100), nullable=False)
    plan_name = Column("nome_plano", String(255), nullable=False)
    price = Column("preco", Integer, nullable=False)  # meticais
    payment_method = Column("metodo_pagamento", String(50), nullable=False)
    status = Column(String(20), nullable=False, default=OrderStatus.PENDING.value)
    created_at = Column(
        "data_pedido", DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    account = relationship("Account", backref="orders")
