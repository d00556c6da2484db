# 📄 File: membership/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Hands out database sessions (like conversations with the database) so each operation gets
# its own clean session, and tidies up properly when something goes wrong.
#
# 🧪 Purpose (Technical Summary):
# Synchronous SQLAlchemy session management: a session factory bound to the configured
# engine and a context manager that rolls back on error and always closes the session.
# Commits are issued by repositories at the end of each aggregate write.
#
# 🔗 Dependencies:
# - sqlalchemy.orm (Session, sessionmaker)
# - membership/shared/infrastructure/database/connection.py (engine, schema)
#
# 🔄 Connected Modules / Calls From:
# - membership.modules.member_management.dependencies (handler wiring)
# - Integration tests

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import exc
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from membership.shared.config.settings import Settings, get_settings
from membership.shared.core.exceptions import DatabaseError, MembershipException
from membership.shared.infrastructure.database.connection import (
    create_database_engine,
    create_schema,
)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with rollback handling and automatic cleanup.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._initialized = False

    def initialize(self, create_tables: bool = True) -> None:
        """Create the engine, optionally the schema, and the session factory."""
        if self._initialized:
            logger.warning("Database session manager already initialized")
            return

        self._engine = create_database_engine(self._settings)
        if create_tables:
            create_schema(self._engine)

        self._session_factory = sessionmaker(
            bind=self._engine,
            class_=Session,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=True,
        )

        self._initialized = True
        logger.info("Database session factory initialized successfully")

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """
        Get a database session.

        Anything left uncommitted when the block raises is rolled back.
        Domain errors propagate unchanged; raw SQLAlchemy errors are
        wrapped in DatabaseError.

        Yields:
            Session: Database session
        """
        if not self._initialized or self._session_factory is None:
            raise DatabaseError("Session manager not initialized", operation="get_session")

        session: Session = self._session_factory()

        try:
            logger.debug("Database session created")
            yield session

        except MembershipException:
            session.rollback()
            raise

        except exc.SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e

        except Exception:
            session.rollback()
            raise

        finally:
            session.close()
            logger.debug("Database session closed")

    @property
    def engine(self) -> Optional[Engine]:
        return self._engine

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._initialized

    def close(self) -> None:
        """Dispose of the engine and forget the session factory."""
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None
        self._initialized = False
