import logging
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from tenacity import retry, stop_after_attempt, wait_fixed, before_sleep_log

from core.config_loader import DatabaseConfig
from database.models import Base

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory SQLite only survives on a single shared connection
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 10,
        "max_overflow": 20,
    }


class Database:
    """
    Owns the engine and session factory for the backing store.

    Constructed explicitly at process start, opened once, closed at
    shutdown, and handed to whoever needs sessions.
    """

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "Database":
        """Create the engine, wait for the store to answer, create tables."""
        if self._engine is not None:
            return self

        self._engine = create_engine(
            self.config.url,
            echo=self.config.echo,
            **_engine_kwargs(self.config.url)
        )
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self._engine
        )

        try:
            self._wait_until_ready()
            if self.config.create_tables:
                Base.metadata.create_all(bind=self._engine)
                logger.info("Tables created or verified.")
        except Exception:
            self.close()
            raise

        return self

    def _wait_until_ready(self) -> None:
        attempts = max(1, self.config.connect_retries)

        @retry(
            stop=stop_after_attempt(attempts),
            wait=wait_fixed(self.config.retry_wait_seconds),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True
        )
        def _ping():
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))

        _ping()
        logger.info("Database connection established")

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None

    def ping(self) -> None:
        """Run a trivial query. Raises if the store is unreachable."""
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def new_session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database is not open")
        return self._session_factory()

    def get_session(self) -> Generator[Session, None, None]:
        """
        Yield a session that is always closed afterwards.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.new_session()
        try:
            yield session
        finally:
            session.close()
