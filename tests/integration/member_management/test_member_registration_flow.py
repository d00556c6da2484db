"""
End-to-end member flows through the production wiring
(SQLAlchemy repository, bcrypt hasher, logging notifier) on SQLite.
"""

from datetime import date

import pytest

from membership.modules.member_management.application.commands import (
    RegisterMemberCommand,
    UpdateMemberInfoCommand,
)
from membership.modules.member_management.domain.models.member import MemberStatus
from membership.modules.member_management.infrastructure.database import SqlAlchemyMemberRepository
from membership.modules.member_management.infrastructure.security import BcryptPasswordHasher
from membership.shared.core.exceptions import (
    DuplicateEmailError,
    InvalidStateError,
    MemberNotFoundError,
)


def test_register_scenario(command_handler):
    member = command_handler.register(RegisterMemberCommand(email="a@b.com", nickname="n", password="p"))

    assert member.status == MemberStatus.PENDING
    assert member.email.value == "a@b.com"
    assert member.password_hash.startswith("$2b$04$")
    assert BcryptPasswordHasher(rounds=4).verify("p", member.password_hash)


def test_same_email_twice(command_handler, query_handler):
    command = RegisterMemberCommand(email="a@b.com", nickname="n", password="p")
    command_handler.register(command)

    with pytest.raises(DuplicateEmailError):
        command_handler.register(command)

    assert query_handler.find_by_email("a@b.com").nickname == "n"


def test_duplicate_race_caught_by_constraint(command_handler, session, monkeypatch):
    """Two registrations that both pass the pre-check still leave one record."""
    command_handler.register(RegisterMemberCommand(email="a@b.com", nickname="first", password="p"))
    monkeypatch.setattr(SqlAlchemyMemberRepository, "find_by_email", lambda self, email: None)

    with pytest.raises(DuplicateEmailError):
        command_handler.register(RegisterMemberCommand(email="a@b.com", nickname="second", password="p"))

    monkeypatch.undo()
    assert SqlAlchemyMemberRepository(session).find_by_id(1).nickname == "first"


def test_full_lifecycle(command_handler, query_handler):
    member_id = command_handler.register(
        RegisterMemberCommand(email="fern@example.com", nickname="Fern", password="p")
    ).member_id
    update = UpdateMemberInfoCommand(nickname="Fern G", profile="fern", birth_date=date(1992, 6, 1))

    with pytest.raises(InvalidStateError):
        command_handler.update_info(member_id, update)

    command_handler.activate(member_id)
    with pytest.raises(InvalidStateError):
        command_handler.activate(member_id)

    command_handler.update_info(member_id, update)
    found = query_handler.find_by_profile("fern")
    assert found.member_id == member_id
    assert found.nickname == "Fern G"
    assert found.detail.birth_date == date(1992, 6, 1)

    command_handler.deactivate(member_id)
    assert query_handler.find_by_id(member_id).status == MemberStatus.INACTIVE

    with pytest.raises(InvalidStateError):
        command_handler.update_info(member_id, update)


def test_changes_visible_to_new_session(session_manager, db_settings):
    from membership.modules.member_management.dependencies import (
        build_member_command_handler,
        build_member_query_handler,
    )

    with session_manager.get_session() as session:
        member_id = build_member_command_handler(session, db_settings).register(
            RegisterMemberCommand(email="a@b.com", nickname="n", password="p")
        ).member_id
        build_member_command_handler(session, db_settings).activate(member_id)

    with session_manager.get_session() as session:
        member = build_member_query_handler(session).find_by_email("a@b.com")

    assert member.member_id == member_id
    assert member.status == MemberStatus.ACTIVE


def test_missing_member(command_handler, query_handler):
    with pytest.raises(MemberNotFoundError):
        command_handler.activate(77)
    with pytest.raises(MemberNotFoundError):
        query_handler.find_by_profile("ghost")
