"""FastAPI dependencies for authentication and database."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from facilitaki.config import Settings
from facilitaki.errors import InvalidTokenError
from facilitaki.models.account import Account
from facilitaki.services.auth import decode_access_token, get_account_by_id
from facilitaki.services.order_service import OrderService

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    yield from request.app.state.database.get_session()


def get_current_account(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Account:
    """Get the current authenticated account from the bearer token."""
    if credentials is None:
        raise InvalidTokenError("Token não fornecido")

    payload = decode_access_token(credentials.credentials, settings)
    if payload is None:
        raise InvalidTokenError("Token inválido ou expirado")

    account_id = payload.get("id")
    if not isinstance(account_id, int):
        raise InvalidTokenError("Token inválido ou expirado")

    account = get_account_by_id(db, account_id)
    if account is None:
        raise InvalidTokenError("Cliente não encontrado")

    return account


def get_order_service(
    db: Annotated[Session, Depends(get_db)],
) -> OrderService:
    """Get order service with dependencies."""
    return OrderService(db)
