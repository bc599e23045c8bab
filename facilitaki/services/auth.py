"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from facilitaki.config import Settings
from facilitaki.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from facilitaki.models.account import Account

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
# bcrypt ignores everything past the first 72 bytes
BCRYPT_MAX_PASSWORD_BYTES = 72

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
    bcrypt__truncate_error=True,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    if len(plain_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(account_id: int, settings: Settings) -> str:
    """Create a JWT access token carrying the account id.

    An ``exp`` claim is only added when ``jwt_expiration_minutes`` is set.
    """
    to_encode: dict[str, Any] = {"id": account_id}
    if settings.jwt_expiration_minutes:
        to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def get_account_by_phone(db: Session, phone: str) -> Account | None:
    """Get an account by phone number."""
    return db.query(Account).filter(Account.phone == phone).first()


def get_account_by_id(db: Session, account_id: int) -> Account | None:
    """Get an account by id."""
    try:
        return db.get(Account, account_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load account %s", account_id)
        raise PersistenceError("Erro ao verificar token") from exc


def register_account(db: Session, name: str, phone: str, password: str) -> Account:
    """Create a new account.

    Raises ConflictError when the phone is taken, including when a concurrent
    registration wins the race on the unique constraint.
    """
    try:
        if get_account_by_phone(db, phone) is not None:
            logger.info("Registration rejected, phone already registered: %s", phone)
            raise ConflictError("Telefone já cadastrado")

        account = Account(name=name, phone=phone, password_hash=get_password_hash(password))
        db.add(account)
        db.commit()
        db.refresh(account)
    except PasswordSizeError as exc:
        raise ValidationError("Senha muito longa", ["senha"]) from exc
    except IntegrityError as exc:
        db.rollback()
        logger.info("Registration lost unique-phone race: %s", phone)
        raise ConflictError("Telefone já cadastrado") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to register account")
        detail = str(getattr(exc, "orig", None) or exc)
        raise PersistenceError("Erro ao cadastrar cliente", detail=detail) from exc

    logger.info("Registered account %s", account.id)
    return account


def authenticate_account(db: Session, phone: str, password: str) -> Account:
    """Authenticate an account by phone and password."""
    try:
        account = get_account_by_phone(db, phone)
    except SQLAlchemyError as exc:
        logger.exception("Failed to load account for login")
        raise PersistenceError("Erro ao fazer login") from exc

    if account is None:
        logger.info("Login failed, unknown phone: %s", phone)
        raise NotFoundError("Cliente não encontrado")
    if not verify_password(password, account.password_hash):
        logger.info("Login failed, wrong password for account %s", account.id)
        raise InvalidCredentialsError("Senha incorreta")
    return account
