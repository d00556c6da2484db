# 📄 File: membership/shared/infrastructure/database/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Groups the pieces that connect the service to its database.
#
# 🧪 Purpose (Technical Summary):
# Database package exports: declarative Base, engine helpers and the session manager.

from .connection import Base, create_database_engine, create_schema, database_health_check
from .session import DatabaseSessionManager

__all__ = [
    "Base",
    "create_database_engine",
    "create_schema",
    "database_health_check",
    "DatabaseSessionManager",
]
