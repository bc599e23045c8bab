"""Authentication schemas.

Field names are the JSON keys the frontend sends and reads.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from facilitaki.services.auth import BCRYPT_MAX_PASSWORD_BYTES

RequiredText = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]
PhoneText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]


def check_password(value: str) -> str:
    """Reject blank passwords and passwords bcrypt would silently truncate."""
    if not value.strip():
        raise ValueError("Password must not be blank")
    if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return value


class RegisterRequest(BaseModel):
    """Customer registration request."""

    nome: RequiredText
    telefone: PhoneText
    senha: str = Field(..., min_length=1, max_length=128)

    @field_validator("senha")
    @classmethod
    def validate_senha(cls, value: str) -> str:
        return check_password(value)


class LoginRequest(BaseModel):
    """Login with phone and password."""

    telefone: PhoneText
    senha: str = Field(..., min_length=1, max_length=128)

    @field_validator("senha")
    @classmethod
    def validate_senha(cls, value: str) -> str:
        return check_password(value)


class LoginResponse(BaseModel):
    """Signed token plus the account's display name."""

    token: str
    usuario: str


class AccountResponse(BaseModel):
    """Public account information."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    nome: str = Field(validation_alias="name")
    telefone: str = Field(validation_alias="phone")


class TokenCheckResponse(BaseModel):
    valido: bool = True
    usuario: AccountResponse


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    mensagem: str
