"""
Database connection and session management.

This module handles:
- Database engine creation with connection pooling
- Session factory setup
- Connection health checks
- Retry logic for establishing the initial connection
- Releasing the pool on shutdown

The connector is owned by the application (``app.state.connector``) and
handed to repositories through request dependencies; nothing here is a
module-level global.
"""

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generator, List, Mapping, Optional
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool

from event_planner.core.config import Settings
from event_planner.core.exceptions import DatabaseException

logger = logging.getLogger('CORE_DATABASE')


@dataclass
class StatementResult:
    """Outcome of a single statement run through ``StorageConnector.execute``."""

    rows: List[Dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0
    lastrowid: Optional[int] = None


class StorageConnector:
    """
    Owns the engine (connection pool) for the lifetime of the process.

    Example:
        connector = StorageConnector(get_settings())
        connector.connect()
        with connector.session() as db:
            db.query(Event).all()
        connector.shutdown()
    """

    def __init__(self, settings: Settings, sleep: Callable[[float], None] = time.sleep):
        self.settings = settings
        self._sleep = sleep
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

    @property
    def is_connected(self) -> bool:
        return self.SessionLocal is not None

    def _engine_config(self, url: str) -> Dict[str, Any]:
        if url.startswith("sqlite"):
            # In-memory SQLite must share one connection across threads
            return {
                'poolclass': StaticPool,
                'connect_args': {'check_same_thread': False},
                'echo': self.settings.db_echo,
            }
        return {
            'poolclass': QueuePool,
            'pool_size': self.settings.db_pool_size,
            'max_overflow': self.settings.db_max_overflow,
            'pool_timeout': self.settings.db_pool_timeout,
            'pool_recycle': self.settings.db_pool_recycle,
            'pool_pre_ping': self.settings.db_pool_pre_ping,
            'echo': self.settings.db_echo,
        }

    def _open(self, url: str) -> Engine:
        engine = create_engine(url, **self._engine_config(url))
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception:
            engine.dispose()
            raise
        return engine

    def connect(self) -> None:
        """
        Establish the connection pool, retrying until the store answers.

        Retries every ``connect_retry_delay`` seconds, multiplying the delay by
        ``connect_retry_backoff`` after each failure. Gives up after
        ``connect_max_attempts`` attempts (0 means never give up).

        Raises:
            DatabaseException: If the attempt limit is exhausted
        """
        if self.is_connected:
            return

        url = self.settings.get_database_url()
        logger.info(f"Initializing database connection to: {self.settings.get_safe_database_url()}")

        max_attempts = self.settings.connect_max_attempts
        delay = self.settings.connect_retry_delay
        attempt = 0

        while True:
            attempt += 1
            try:
                self.engine = self._open(url)
                break
            except SQLAlchemyError as e:
                limit = max_attempts if max_attempts > 0 else "unlimited"
                logger.error(f"Database connection failed (attempt {attempt}/{limit}): {e}")
                if 0 < max_attempts <= attempt:
                    raise DatabaseException(
                        f"Could not connect to the database after {attempt} attempts"
                    ) from e
                logger.info(f"Retrying in {delay:g} seconds...")
                self._sleep(delay)
                delay *= self.settings.connect_retry_backoff

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info("Connected to database.")

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> StatementResult:
        """
        Run a parameterized statement and commit it.

        Args:
            sql: Statement text using ``:name`` placeholders
            params: Values bound to the placeholders

        Returns:
            StatementResult: Rows for reads, affected count and inserted id for writes

        Raises:
            DatabaseException: If not connected or the statement is rejected
        """
        if self.engine is None:
            raise DatabaseException("Database connection is not available")

        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(sql), dict(params or {}))
                rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
                lastrowid = getattr(result, "lastrowid", None)
                return StatementResult(rows=rows, rowcount=result.rowcount, lastrowid=lastrowid)
        except SQLAlchemyError as e:
            logger.error(f"Statement failed: {e}")
            raise DatabaseException("Database query failed") from e

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager yielding an ORM session that is always closed.

        Raises:
            DatabaseException: If the connector has not connected yet
        """
        if self.SessionLocal is None:
            raise DatabaseException("Database connection is not available")

        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def health(self) -> Dict[str, Any]:
        """
        Check database connection health and return status.

        Returns:
            dict: Health status with connection pool information
        """
        try:
            self.execute("SELECT 1")
            return {
                "status": "healthy",
                "connection_pool": self.engine.pool.status(),
            }
        except DatabaseException as e:
            return {
                "status": "unhealthy",
                "error": e.message,
            }

    def shutdown(self) -> None:
        """Dispose of the pool. Errors while closing are logged, never raised."""
        if self.engine is None:
            return

        logger.info("Closing database connection...")
        try:
            self.engine.dispose()
        except Exception as e:
            logger.error(f"Error closing database: {e}")
        finally:
            self.engine = None
            self.SessionLocal = None
        logger.info("Database connection closed.")
