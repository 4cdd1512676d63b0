"""
Database engine, session management, and base model.

This module is the foundation for all database operations.
Every model inherits from Base. Every request gets a session
from get_db().
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from account_system.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests connections before using them,
# which handles cases where the database restarted or a
# connection went stale.
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # FastAPI runs sync endpoints in a worker thread
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

# --- Session Factory ---
# autocommit=False: the request handler decides when an
# operation's writes land, all of them or none.
# autoflush=False: SQL is only sent on explicit flush/commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


# --- Base Model Class ---
class Base(DeclarativeBase):
    pass


def init_db() -> None:
    """Create any missing tables for the registered models."""
    # Importing the package registers every model on Base.metadata
    import account_system.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The session is the unit of work for the request: the
    endpoint commits on success or rolls back on failure,
    and the session is always closed afterwards so that
    connections are never leaked from the pool.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
