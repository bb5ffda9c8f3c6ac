"""Database engine and session configuration."""

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from .config import DatabaseSettings


class Base(DeclarativeBase):
    """Base class for the legacy schema models."""

    pass


def build_database_url(settings: DatabaseSettings) -> URL:
    """Turn connection parameters into a SQLAlchemy URL."""

    url = URL.create(
        drivername=settings.adapter,
        username=settings.username,
        password=settings.password,
        host=settings.host,
        database=settings.database,
    )
    # SQLite rejects URLs that carry credentials or a host
    if url.get_backend_name() == "sqlite":
        url = URL.create(drivername=settings.adapter, database=settings.database)
    return url


def create_db_engine(url: URL | str) -> Engine:
    return create_engine(url, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to ``engine``."""

    return sessionmaker(bind=engine, autoflush=False, autocommit=False)
