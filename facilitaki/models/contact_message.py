"""Contact form message model."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from facilitaki.database import Base


class ContactMessage(Base):
    __tablename__ = "contatos"

    id = Column(Integer, primary_key=True, index=True)
    name = Column("nome", String(255), nullable=False)
    phone = Column("telefone", String(50), nullable=False)
    email = Column(String(255), nullable=True)
    message = Column("mensagem", Text, nullable=False)
    created_at = Column(
        "data_envio", DateTime(timezone=True), server_default=func.now(), nullable=False
    )
