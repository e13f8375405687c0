import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from signup_backend.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_database_url(settings: Settings) -> URL:
    if settings.database_url:
        return make_url(settings.database_url)
    return URL.create(
        "mysql+pymysql",
        username=settings.db_user,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
    )


def _engine_options(url: URL, settings: Settings) -> dict:
    if url.get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": 0,
        "pool_timeout": settings.db_pool_timeout,
        "pool_pre_ping": True,
    }


class Database:
    """Owns the engine and session factory for the lifetime of the process."""

    def __init__(self, settings: Settings, engine: Engine | None = None) -> None:
        self.url = build_database_url(settings)
        self.engine = engine or create_engine(self.url, **_engine_options(self.url, settings))
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.engine.dialect.name == "sqlite"

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def create_database_if_missing(self) -> None:
        if self.is_sqlite or not self.url.database:
            return

        server_engine = create_engine(self.url.set(database=None))
        try:
            quoted_name = server_engine.dialect.identifier_preparer.quote(self.url.database)
            with server_engine.begin() as connection:
                connection.execute(text(f"CREATE DATABASE IF NOT EXISTS {quoted_name}"))
        finally:
            server_engine.dispose()
        logger.info("Database %s ready", self.url.database)

    def dispose(self) -> None:
        self.engine.dispose()
