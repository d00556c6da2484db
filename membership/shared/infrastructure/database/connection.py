# 📄 File: membership/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the database where member records are kept, and makes sure
# the tables exist before anything is read or written.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy engine construction from settings, shared declarative Base for ORM models,
# schema creation and a simple connectivity health check.
#
# 🔗 Dependencies:
# - sqlalchemy (engine, declarative base)
# - membership/shared/config/settings.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - membership/shared/infrastructure/database/session.py (session management)
# - membership/modules/member_management/infrastructure/database/models.py (Base)

import logging
from typing import Any, Dict, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from membership.shared.config.settings import Settings, get_settings
from membership.shared.core.exceptions import DatabaseError

logger = logging.getLogger(__name__)

Base = declarative_base()


def _build_engine_params(settings: Settings) -> Dict[str, Any]:
    """Build SQLAlchemy engine parameters from settings."""
    params: Dict[str, Any] = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": settings.DB_POOL_PRE_PING,
        "future": True,
    }

    if settings.is_sqlite:
        params["connect_args"] = {"check_same_thread": False}
        # An in-memory database only lives as long as its single connection.
        if ":memory:" in settings.DATABASE_URL or settings.DATABASE_URL == "sqlite://":
            params["poolclass"] = StaticPool

    return params


def create_database_engine(settings: Optional[Settings] = None) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.

    SQLite connections get foreign key enforcement switched on so the
    member detail cascade behaves as on PostgreSQL.
    """
    settings = settings or get_settings()
    engine = create_engine(settings.DATABASE_URL, **_build_engine_params(settings))

    if settings.is_sqlite:
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    logger.info(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")
    return engine


def create_schema(engine: Engine) -> None:
    """Create all tables registered on the shared Base."""
    # Registers the member tables on Base.metadata.
    import membership.modules.member_management.infrastructure.database.models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database schema ensured")
    except SQLAlchemyError as e:
        logger.error(f"Failed to create database schema: {e}")
        raise DatabaseError(f"Schema creation failed: {e}", operation="create_schema") from e


def database_health_check(engine: Engine) -> Dict[str, Any]:
    """
    Perform database health check.

    Returns:
        Dict with status and, on failure, the error message
    """
    try:
        with engine.connect() as connection:
            value = connection.execute(text("SELECT 1")).scalar()
        return {"status": "healthy" if value == 1 else "unhealthy"}
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}
