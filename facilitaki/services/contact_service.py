"""Contact form persistence."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from facilitaki.errors import PersistenceError
from facilitaki.models.contact_message import ContactMessage
from facilitaki.schemas.contact import ContactCreate

logger = logging.getLogger(__name__)


def save_contact_message(db: Session, contact: ContactCreate) -> ContactMessage:
    """Store a message from the contact form."""
    message = ContactMessage(
        name=contact.nome,
        phone=contact.telefone,
        email=contact.email,
        message=contact.mensagem,
    )
    try:
        db.add(message)
        db.commit()
        db.refresh(message)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to store contact message")
        raise PersistenceError("Erro ao enviar mensagem") from exc

    logger.info("Stored contact message %s from %s", message.id, message.phone)
    return message
