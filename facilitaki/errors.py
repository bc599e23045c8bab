"""Error types raised by services and mapped to HTTP responses in ``facilitaki.main``."""

from fastapi import status


class FacilitakiError(Exception):
    """Base error carrying the HTTP status and the message shown to the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_body(self, include_detail: bool = True) -> dict[str, str]:
        body = {"erro": self.message}
        if include_detail and self.detail:
            body["detalhe"] = self.detail
        return body


class ValidationError(FacilitakiError):
    """Required input missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []

    def to_body(self, include_detail: bool = True) -> dict:
        body: dict = super().to_body(include_detail)
        body["campos"] = self.fields
        return body


class AuthenticationError(FacilitakiError):
    """The caller could not be authenticated."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AuthenticationError):
    """No account is registered under the given phone."""


class InvalidCredentialsError(AuthenticationError):
    """Password does not match the stored hash."""


class InvalidTokenError(AuthenticationError):
    """Bearer token missing, malformed, badly signed or expired."""

    headers = {"WWW-Authenticate": "Bearer"}


class ConflictError(FacilitakiError):
    """Phone already registered."""

    status_code = status.HTTP_409_CONFLICT


class PersistenceError(FacilitakiError):
    """Database or connectivity failure."""
