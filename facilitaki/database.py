"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base: Any = declarative_base()


class Database:
    """Connection pool handle owned by the application.

    Built by the application factory, connected on startup and disposed on
    shutdown. Request handlers reach it through ``facilitaki.api.dependencies``.
    """

    def __init__(self, url: str):
        self.url = url
        self.engine: Engine | None = None
        self.session_factory: sessionmaker | None = None
        self.tables_ready = False

    def connect(self) -> bool:
        """Create the pooled engine and check that the database answers.

        Returns False when the database is unreachable. The engine is kept
        either way so later requests can succeed once it comes back.
        """
        connect_args = {"check_same_thread": False} if self.url.startswith("sqlite") else {}
        self.engine = create_engine(self.url, pool_pre_ping=True, connect_args=connect_args)
        self.session_factory = sessionmaker(autoflush=False, bind=self.engine)

        safe_url = self.engine.url.render_as_string(hide_password=True)
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Could not connect to database at %s", safe_url)
            return False

        logger.info("Connected to database at %s", safe_url)
        return True

    def create_tables(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        # Import all models here so they are registered with Base.metadata
        from facilitaki import models  # noqa: F401

        Base.metadata.create_all(bind=self._require_engine())
        self.tables_ready = True
        logger.info("Database tables ready: %s", ", ".join(sorted(Base.metadata.tables)))

    def get_session(self) -> Generator[Session, None, None]:
        """Yield a session bound to the pool, closing it afterwards."""
        if self.session_factory is None:
            raise RuntimeError("Database.connect() must be called before opening sessions")
        if not self.tables_ready:
            self._retry_create_tables()
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        """Close every pooled connection."""
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connections closed")
        self.engine = None
        self.session_factory = None
        self.tables_ready = False

    def _retry_create_tables(self) -> None:
        """Create the schema on first use when the database was down at startup.

        Failures are logged and left to the request, whose own query reports them.
        """
        try:
            self.create_tables()
        except SQLAlchemyError:
            logger.warning("Database still unavailable, tables not created yet")

    def _require_engine(self) -> Engine:
        if self.engine is None:
            raise RuntimeError("Database.connect() must be called first")
        return self.engine
