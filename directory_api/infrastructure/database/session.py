# directory_api/infrastructure/database/session.py

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from directory_api.core.exceptions import AppError, PersistenceError
from directory_api.infrastructure.database.base_model import BaseModel

import directory_api.infrastructure.database.models  # noqa: F401

logger = logging.getLogger(__name__)


class Database:
    """Persistence gateway: one engine + sessionmaker, injected where needed."""

    def __init__(self, url: str | None, *, echo: bool = False) -> None:
        self.url = url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

        if not url:
            logger.error("DATABASE_URL is not configured; data endpoints will fail")
            return

        self._engine = create_engine(url, echo=echo, pool_pre_ping=True)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

    @property
    def configured(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise PersistenceError("Database is not configured", detail="DATABASE_URL is missing")
        return self._engine

    def create_schema(self) -> None:
        BaseModel.metadata.create_all(bind=self.engine)

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("select 1"))
            return True
        except (SQLAlchemyError, PersistenceError) as err:
            logger.error("Database connection check failed: %s", err)
            return False

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        if self._session_factory is None:
            raise PersistenceError("Database is not configured", detail="DATABASE_URL is missing")

        session: Session = self._session_factory()
        try:
            yield session
            session.commit()
        except AppError:
            session.rollback()
            raise
        except SQLAlchemyError as err:
            session.rollback()
            logger.exception("Database operation failed")
            raise PersistenceError("Database error", detail=str(err)) from err
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
