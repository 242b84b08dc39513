# models/db_init.py

import os
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .base import Base, logger

DEFAULT_DB_URL = "sqlite:///dpr_data.db"


def get_database_url() -> str:
    """Resolve the database URL from the environment, falling back to the local SQLite file."""
    return os.environ.get("DATABASE_URL") or DEFAULT_DB_URL


def create_db_engine(db_url: Optional[str] = None, echo: bool = False) -> Engine:
    """
    Create the process-wide engine (and its connection pool) for ``db_url``.

    SQLite connections are shared across worker threads, so the same-thread
    check is disabled for that dialect.
    """
    db_url = db_url or get_database_url()
    connect_args = {}
    engine_kwargs = {"echo": echo, "pool_pre_ping": True}

    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    else:
        engine_kwargs.update(pool_recycle=3600, pool_size=10, max_overflow=20)

    return create_engine(db_url, connect_args=connect_args, **engine_kwargs)


def init_db(engine: Engine) -> sessionmaker:
    """
    Verify connectivity, create the schema if missing and return a session factory.

    Fails fast: there is no retry loop, so a bad URL or unreachable server
    surfaces immediately to the caller.
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection established successfully")
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        raise

    # Create table and indexes (IF NOT EXISTS semantics)
    try:
        Base.metadata.create_all(engine)
        logger.info("Database schema created or verified successfully")
    except Exception as e:
        logger.error(f"Failed to create database schema: {e}")
        raise

    return sessionmaker(bind=engine, expire_on_commit=False)
