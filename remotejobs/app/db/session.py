"""
Database engine and session factory construction.
"""
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from remotejobs.app.core.logging_config import get_logger

logger = get_logger("db.session")


def build_engine(database_url: str) -> Engine:
    """Create an engine; SQLite gets the thread flag FastAPI needs."""
    kwargs = {"echo": False, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url:
            # one shared connection, otherwise every session sees an empty DB
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def database_is_up(engine: Engine) -> bool:
    """Cheap connectivity probe used by the health endpoint."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning("Database probe failed: %s", e)
        return False
