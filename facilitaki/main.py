"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path, PurePosixPath

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Scope

from facilitaki import __version__
from facilitaki.api import auth, contact, orders
from facilitaki.config import Settings, get_settings
from facilitaki.database import Database
from facilitaki.errors import FacilitakiError, ValidationError

logger = logging.getLogger(__name__)


class SinglePageStaticFiles(StaticFiles):
    """Static files with a fallback to the HTML entry point.

    Unknown paths and dot-files (``.env``, ``.git/...``) get the entry point
    instead of a 404 or the file itself.
    """

    def __init__(self, *, index_file: str = "index.html", **kwargs):
        super().__init__(**kwargs)
        self.index_file = index_file

    async def get_response(self, path: str, scope: Scope):
        if any(part.startswith(".") for part in PurePosixPath(path).parts):
            return await super().get_response(self.index_file, scope)
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != status.HTTP_404_NOT_FOUND:
                raise
            return await super().get_response(self.index_file, scope)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the database on startup and release the pool on shutdown."""
    database: Database = app.state.database
    if database.connect():
        try:
            database.create_tables()
        except SQLAlchemyError:
            logger.exception("Could not create database tables")
    else:
        logger.warning("Starting without a database; requests will fail until it is reachable")
    yield
    database.dispose()


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Map error types to JSON responses."""

    def error_response(exc: FacilitakiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_body(include_detail=settings.expose_error_details),
            headers=exc.headers,
        )

    @app.exception_handler(FacilitakiError)
    async def handle_facilitaki_error(request: Request, exc: FacilitakiError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        fields = sorted({str(error["loc"][-1]) for error in exc.errors() if error.get("loc")})
        return error_response(ValidationError("Preencha todos os campos obrigatórios", fields))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"erro": "Erro interno do servidor"},
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around an explicit settings object and database handle."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Facilitaki API",
        description="Customer registration, login and service orders",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)

    # Register routers
    app.include_router(auth.router)
    app.include_router(orders.router)
    app.include_router(contact.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    # Must be mounted after API routes
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount(
            "/",
            SinglePageStaticFiles(
                directory=str(static_dir), html=True, index_file=settings.index_file
            ),
            name="static",
        )
    else:
        logger.warning("Static directory %s not found; serving API only", static_dir)

    return app
