"""
Shared test configuration and fixtures.

Provides in-memory doubles for the three member ports (repository,
password hasher, notifier) plus ready-made settings and handlers.
"""

import pytest

from membership.modules.member_management.application.handlers import (
    MemberCommandHandler,
    MemberQueryHandler,
)
from membership.shared.config.settings import Settings
from tests.fakes import (
    FailingNotifier,
    FakePasswordHasher,
    InMemoryMemberRepository,
    RecordingNotifier,
)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        APP_NAME="Membership Test",
        ENVIRONMENT="test",
        LOG_FORMAT="text",
        DATABASE_URL="sqlite://",
        BCRYPT_ROUNDS=4,
        NOTIFICATIONS_ENABLED=True,
        WELCOME_EMAIL_SUBJECT="Welcome aboard",
    )


@pytest.fixture
def member_repository() -> InMemoryMemberRepository:
    return InMemoryMemberRepository()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def failing_notifier() -> FailingNotifier:
    return FailingNotifier()


@pytest.fixture
def command_handler(member_repository, password_hasher, notifier, test_settings) -> MemberCommandHandler:
    return MemberCommandHandler(member_repository, password_hasher, notifier, settings=test_settings)


@pytest.fixture
def query_handler(member_repository) -> MemberQueryHandler:
    return MemberQueryHandler(member_repository)
