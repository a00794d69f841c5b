# app/database.py
"""
Database engine, session factory, and table creation for the sql storage backend.
All models are auto-imported in create_tables() so every table is created in one call.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Create an engine for DATABASE_URL. SQLite gets a single shared connection when in-memory."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=False, **kwargs)

    return create_engine(
        database_url,
        pool_pre_ping=True,          # Auto-reconnect if DB connection drops
        pool_size=10,
        max_overflow=20,
        echo=False,                  # Set True to log all SQL queries (debug only)
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    # Rows are handed back to the façade after the session closes
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def create_tables(engine: Engine):
    """
    Creates all DB tables. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from app.models.user import User              # noqa
    from app.models.driver import Driver          # noqa
    from app.models.vehicle import Vehicle        # noqa
    from app.models.feedback import Feedback      # noqa
    from app.models.activity import Activity      # noqa

    Base.metadata.create_all(bind=engine)
