"""Account model."""

from sqlalchemy import Column, DateTime, Integer, String, func

from facilitaki.database import Base


class Account(Base):
    """Customer account, identified at login by its phone number.

    Column names follow the ``clientes`` table the frontend was built against.
    """

    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column("nome", String(255), nullable=False)
    phone = Column("telefone", String(50), unique=True, nullable=False, index=True)
    password_hash = Column("senha", String(255), nullable=False)
    created_at = Column(
        "data_cadastro", DateTime(timezone=True), server_default=func.now(), nullable=False
    )
