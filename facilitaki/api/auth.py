"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from facilitaki.api.dependencies import get_app_settings, get_current_account, get_db
from facilitaki.config import Settings
from facilitaki.models.account import Account
from facilitaki.schemas.auth import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    TokenCheckResponse,
)
from facilitaki.services.auth import authenticate_account, create_access_token, register_account

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/cadastrar", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new customer."""
    register_account(db, data.nome, data.telefone, data.senha)
    return MessageResponse(mensagem="Cadastro realizado com sucesso")


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Login with phone and password."""
    account = authenticate_account(db, credentials.telefone, credentials.senha)
    token = create_access_token(account.id, settings)
    return LoginResponse(token=token, usuario=account.name)


@router.get("/verificar-token", response_model=TokenCheckResponse)
def verify_token(
    current_account: Annotated[Account, Depends(get_current_account)],
):
    """Check that the bearer token is still valid."""
    return TokenCheckResponse(usuario=AccountResponse.model_validate(current_account))
