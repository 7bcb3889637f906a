"""Database configuration and session management."""

from __future__ import annotations

import logging

from sqlalchemy import Engine, MetaData, Table, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import StorageConfig
from app.domain.errors import StorageError
from app.infrastructure.models import build_directory_item_table

logger = logging.getLogger(__name__)


def build_engine(config: StorageConfig) -> Engine:
    """Create the SQLAlchemy engine for ``config.database_url``.

    In-memory SQLite databases share a single connection so that every
    session sees the same data.
    """

    url = config.database_url
    if url.startswith("sqlite") and (":memory:" in url or url.rstrip("/") == "sqlite:"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_table(engine: Engine, config: StorageConfig) -> Table:
    """Ensure the item table named in ``config`` exists and return it."""

    metadata = MetaData()
    table = build_directory_item_table(metadata, config.table_name)
    try:
        metadata.create_all(bind=engine, checkfirst=True)
    except SQLAlchemyError as exc:
        raise StorageError(f"Unable to initialize table '{config.table_name}'") from exc
    logger.info(
        "Channel directory table '%s' ready (region=%s)",
        config.table_name,
        config.region or "default",
    )
    return table


__all__ = ["build_engine", "build_session_factory", "initialize_table"]
