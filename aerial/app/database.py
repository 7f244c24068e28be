"""Database configuration and session management for the aerial site."""

import collections.abc
import pathlib

import sqlalchemy
import sqlmodel

from . import settings

connect_args = (
    {'check_same_thread': False} if settings.DATABASE_URL.startswith('sqlite') else {}
)
engine = sqlmodel.create_engine(settings.DATABASE_URL, connect_args=connect_args)


def create_db_and_tables(db_engine: sqlalchemy.Engine | None = None) -> None:
    """Create database tables if they don't exist."""
    # Import models to ensure they're registered with SQLModel
    from .photos import models as photo_models  # noqa: F401 # pyright: ignore[reportUnusedImport]
    from .quotes import models as quote_models  # noqa: F401 # pyright: ignore[reportUnusedImport]

    if db_engine is None:
        db_engine = engine
        if settings.DATABASE_URL.startswith('sqlite:///'):
            db_path = pathlib.Path(settings.DATABASE_URL.removeprefix('sqlite:///'))
            db_path.parent.mkdir(parents=True, exist_ok=True)
    sqlmodel.SQLModel.metadata.create_all(db_engine)


def get_session() -> collections.abc.Generator[sqlmodel.Session, None, None]:
    """Get a database session."""
    with sqlmodel.Session(engine) as session:
        yield session
