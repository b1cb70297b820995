"""History database: engine and session setup for the locked-week store."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from .models import Base


DEFAULT_DB_URL = "sqlite:///roster.db"


def _ensure_sqlite_folder(db_url: str) -> None:
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def history_engine(db_url: str = DEFAULT_DB_URL) -> Engine:
    """Engine with the ``locked_weeks`` table in place; a SQLite file's folder is created."""
    _ensure_sqlite_folder(db_url)
    engine = create_engine(db_url)
    Base.metadata.create_all(engine)
    return engine


def init_database(db_url: str = DEFAULT_DB_URL) -> Engine:
    engine = history_engine(db_url)
    print(f"[INFO] History database ready: {db_url}")
    return engine


def open_session(db_url: str = DEFAULT_DB_URL) -> Session:
    """New session on the history database; the caller closes it."""
    return sessionmaker(bind=history_engine(db_url))()
