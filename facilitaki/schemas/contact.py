"""Contact form schemas."""

from typing import Annotated, Any

from pydantic import BaseModel, Field, StringConstraints, field_validator

from facilitaki.schemas.auth import PhoneText, RequiredText


class ContactCreate(BaseModel):
    """Message sent from the public contact form."""

    nome: RequiredText
    telefone: PhoneText
    email: str | None = Field(None, max_length=255)
    mensagem: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=5000)
    ]

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
