"""
Integration fixtures: a real SQLite database file per test.
"""

import pytest

from membership.modules.member_management.dependencies import (
    build_member_command_handler,
    build_member_query_handler,
)
from membership.modules.member_management.infrastructure.database import SqlAlchemyMemberRepository
from membership.shared.config.settings import Settings
from membership.shared.infrastructure.database import DatabaseSessionManager


@pytest.fixture
def db_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite:///{tmp_path / 'membership.db'}",
        BCRYPT_ROUNDS=4,
        LOG_FORMAT="text",
    )


@pytest.fixture
def session_manager(db_settings):
    manager = DatabaseSessionManager(db_settings)
    manager.initialize(create_tables=True)
    yield manager
    manager.close()


@pytest.fixture
def session(session_manager):
    with session_manager.get_session() as session:
        yield session


@pytest.fixture
def repository(session) -> SqlAlchemyMemberRepository:
    return SqlAlchemyMemberRepository(session)


@pytest.fixture
def command_handler(session, db_settings):
    return build_member_command_handler(session, db_settings)


@pytest.fixture
def query_handler(session):
    return build_member_query_handler(session)
