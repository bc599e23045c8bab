"""Contact form endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from facilitaki.api.dependencies import get_db
from facilitaki.schemas.auth import MessageResponse
from facilitaki.schemas.contact import ContactCreate
from facilitaki.services.contact_service import save_contact_message

router = APIRouter(prefix="/api", tags=["contact"])


@router.post("/contato", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_contact_message(
    contact: ContactCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """Store a message from the contact form."""
    save_contact_message(db, contact)
    return MessageResponse(mensagem="Mensagem enviada com sucesso")
