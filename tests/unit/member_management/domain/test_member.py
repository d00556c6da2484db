"""
Unit tests for the Member aggregate and its MemberDetail.

Tests cover:
- Registration factory validation and initial state
- PENDING -> ACTIVE -> INACTIVE transitions cascading to the detail
- Rejected transitions leaving state untouched
- update_info validation and ACTIVE-only guard
"""

from datetime import date
from types import SimpleNamespace

import pytest

from membership.modules.member_management.application.commands import (
    RegisterMemberCommand,
    UpdateMemberInfoCommand,
)
from membership.modules.member_management.domain.models.member import (
    Member,
    MemberDetail,
    MemberDetailStatus,
    MemberStatus,
)
from membership.modules.member_management.domain.models.value_objects import Email, Profile
from membership.shared.core.exceptions import InvalidStateError, ValidationError
from tests.builders.member_builder import MemberBuilder
from tests.fakes import FakePasswordHasher


@pytest.fixture
def hasher():
    return FakePasswordHasher()


class TestMemberRegistration:
    """Test suite for Member.register."""

    def test_register_creates_pending_member(self, hasher):
        member = Member.register(
            RegisterMemberCommand(email="a@b.com", nickname="n", password="p"),
            hasher
        )

        assert member.member_id is None
        assert member.email == Email("a@b.com")
        assert member.nickname == "n"
        assert member.status == MemberStatus.PENDING
        assert member.is_pending()

    def test_register_creates_pending_detail(self, hasher):
        member = Member.register(
            RegisterMemberCommand(email="a@b.com", nickname="n", password="p"),
            hasher
        )

        assert member.detail.status == MemberDetailStatus.PENDING
        assert member.detail.profile.is_set is False
        assert member.detail.birth_date is None

    def test_register_hashes_password(self, hasher):
        member = Member.register(
            RegisterMemberCommand(email="a@b.com", nickname="n", password="secret"),
            hasher
        )

        assert member.password_hash == "hashed::secret"
        assert member.matches_password("secret", hasher)
        assert not member.matches_password("wrong", hasher)

    def test_register_accepts_any_request_shape(self, hasher):
        request = SimpleNamespace(email="a@b.com", nickname="n", password="p")
        member = Member.register(request, hasher)
        assert member.email.value == "a@b.com"

    @pytest.mark.parametrize("email", [None, "", "not-an-email"])
    def test_register_rejects_bad_email(self, hasher, email):
        with pytest.raises(ValidationError) as exc_info:
            Member.register(RegisterMemberCommand(email=email, nickname="n", password="p"), hasher)
        assert exc_info.value.details["field"] == "email"

    @pytest.mark.parametrize("nickname", [None, "", "   "])
    def test_register_requires_nickname(self, hasher, nickname):
        with pytest.raises(ValidationError) as exc_info:
            Member.register(RegisterMemberCommand(email="a@b.com", nickname=nickname, password="p"), hasher)
        assert exc_info.value.details["field"] == "nickname"

    @pytest.mark.parametrize("password", [None, ""])
    def test_register_requires_password(self, hasher, password):
        with pytest.raises(ValidationError) as exc_info:
            Member.register(RegisterMemberCommand(email="a@b.com", nickname="n", password=password), hasher)
        assert exc_info.value.details["field"] == "password"

    def test_register_sets_timestamps(self, hasher):
        member = Member.register(
            RegisterMemberCommand(email="a@b.com", nickname="n", password="p"),
            hasher
        )
        assert member.created_at == member.updated_at
        assert member.created_at.tzinfo is not None


class TestMemberLifecycle:
    """Test suite for activate / deactivate."""

    def test_activate_from_pending(self):
        member = MemberBuilder().pending().build()
        member.activate()

        assert member.status == MemberStatus.ACTIVE
        assert member.detail.status == MemberDetailStatus.ACTIVE
        assert member.is_active()

    def test_activate_refreshes_updated_at(self):
        member = MemberBuilder().pending().build()
        before = member.updated_at
        member.activate()
        assert member.updated_at > before

    @pytest.mark.parametrize("state", ["active", "inactive"])
    def test_activate_rejected_outside_pending(self, state):
        member = getattr(MemberBuilder(), state)().build()
        snapshot = member.model_dump()

        with pytest.raises(InvalidStateError) as exc_info:
            member.activate()

        assert exc_info.value.error_code == "INVALID_STATE"
        assert exc_info.value.details["required_status"] == "PENDING"
        assert exc_info.value.details["operation"] == "activate"
        assert member.model_dump() == snapshot

    def test_activate_twice_fails(self):
        member = MemberBuilder().pending().build()
        member.activate()

        with pytest.raises(InvalidStateError) as exc_info:
            member.activate()

        assert "not in PENDING state" in exc_info.value.message
        assert member.status == MemberStatus.ACTIVE

    def test_deactivate_from_active(self):
        member = MemberBuilder().active().build()
        member.deactivate()

        assert member.status == MemberStatus.INACTIVE
        assert member.detail.status == MemberDetailStatus.INACTIVE
        assert member.is_inactive()

    @pytest.mark.parametrize("state", ["pending", "inactive"])
    def test_deactivate_rejected_outside_active(self, state):
        member = getattr(MemberBuilder(), state)().build()
        snapshot = member.model_dump()

        with pytest.raises(InvalidStateError) as exc_info:
            member.deactivate()

        assert exc_info.value.details["current_status"] == snapshot["status"].value
        assert member.model_dump() == snapshot

    def test_inactive_is_terminal(self):
        member = MemberBuilder().pending().build()
        member.activate()
        member.deactivate()

        for operation in (member.activate, member.deactivate):
            with pytest.raises(InvalidStateError):
                operation()
        assert member.status == MemberStatus.INACTIVE

    def test_detail_status_mirrors_root(self):
        member = MemberBuilder().pending().build()
        for step in (member.activate, member.deactivate):
            step()
            assert member.detail.status.value == member.status.value


class TestMemberUpdateInfo:
    """Test suite for update_info."""

    def test_update_info_while_active(self):
        member = MemberBuilder().active().build()
        member.update_info(UpdateMemberInfoCommand(
            nickname="Moss",
            profile="green_thumb",
            birth_date=date(1990, 5, 17)
        ))

        assert member.nickname == "Moss"
        assert member.detail.profile == Profile("green_thumb")
        assert member.detail.birth_date == date(1990, 5, 17)
        assert member.status == MemberStatus.ACTIVE

    def test_update_info_clears_profile(self):
        member = MemberBuilder().active().with_profile("fern").build()
        member.update_info(UpdateMemberInfoCommand(nickname="Fern", profile=None, birth_date=None))

        assert member.detail.profile.is_set is False
        assert member.detail.birth_date is None

    @pytest.mark.parametrize("state", ["pending", "inactive"])
    def test_update_info_rejected_outside_active(self, state):
        member = getattr(MemberBuilder(), state)().build()
        snapshot = member.model_dump()

        with pytest.raises(InvalidStateError):
            member.update_info(UpdateMemberInfoCommand(nickname="Moss", profile="moss"))

        assert member.model_dump() == snapshot

    def test_update_info_state_checked_before_input(self):
        member = MemberBuilder().pending().build()
        with pytest.raises(InvalidStateError):
            member.update_info(UpdateMemberInfoCommand(nickname=None, profile="bad handle"))

    def test_update_info_requires_nickname(self):
        member = MemberBuilder().active().build()
        snapshot = member.model_dump()

        with pytest.raises(ValidationError) as exc_info:
            member.update_info(UpdateMemberInfoCommand(nickname=None, profile="moss"))

        assert exc_info.value.details["field"] == "nickname"
        assert member.model_dump() == snapshot

    def test_update_info_bad_profile_changes_nothing(self):
        member = MemberBuilder().active().with_nickname("Fern").build()
        snapshot = member.model_dump()

        with pytest.raises(ValidationError):
            member.update_info(UpdateMemberInfoCommand(nickname="Moss", profile="x" * 16))

        assert member.nickname == "Fern"
        assert member.model_dump() == snapshot


class TestMemberSerialization:
    """Test suite for to_dict."""

    def test_to_dict_hides_password_hash(self):
        data = MemberBuilder().with_id(7).with_profile("fern").build().to_dict()

        assert data["member_id"] == 7
        assert data["email"] == "member@example.com"
        assert data["profile"] == "fern"
        assert data["status"] == "PENDING"
        assert "password_hash" not in data

    def test_to_dict_sensitive(self):
        data = MemberBuilder().build().to_dict(include_sensitive=True)
        assert data["password_hash"] == "hashed::secret"


class TestMemberDetail:
    """MemberDetail defaults as created by the factory."""

    def test_defaults(self):
        detail = MemberDetail()
        assert detail.status == MemberDetailStatus.PENDING
        assert detail.profile == Profile.unset()
        assert detail.detail_id is None


class TestMemberFieldsAreReadOnly:
    """State only changes through the lifecycle methods."""

    @pytest.mark.parametrize("field, value", [
        ("status", MemberStatus.ACTIVE),
        ("nickname", "intruder"),
        ("detail", MemberDetail(status=MemberDetailStatus.ACTIVE)),
        ("member_id", 99),
        ("updated_at", None),
    ])
    def test_member_assignment_rejected(self, field, value):
        member = MemberBuilder().build()
        before = member.model_dump()

        with pytest.raises(AttributeError, match="read-only"):
            setattr(member, field, value)

        assert member.model_dump() == before
        assert member.is_pending()

    @pytest.mark.parametrize("field, value", [
        ("status", MemberDetailStatus.INACTIVE),
        ("profile", Profile("sneaky")),
        ("birth_date", date(2000, 1, 1)),
    ])
    def test_detail_assignment_rejected(self, field, value):
        member = MemberBuilder().active().build()
        before = member.detail.model_dump()

        with pytest.raises(AttributeError, match="read-only"):
            setattr(member.detail, field, value)

        assert member.detail.model_dump() == before

    def test_pending_member_cannot_be_forced_active(self):
        member = MemberBuilder().build()

        with pytest.raises(AttributeError):
            member.status = MemberStatus.ACTIVE

        member.activate()
        assert member.is_active()
        assert member.detail.status == MemberDetailStatus.ACTIVE

    def test_fields_stay_locked_after_lifecycle_methods(self):
        member = MemberBuilder().build()
        member.activate()
        member.update_info(UpdateMemberInfoCommand(nickname="new", profile="leafy"))

        with pytest.raises(AttributeError):
            member.nickname = "other"
        with pytest.raises(AttributeError):
            member.detail.profile = Profile("other")

        assert member.nickname == "new"
        assert member.detail.profile == Profile("leafy")

    def test_failed_transition_leaves_fields_locked(self):
        member = MemberBuilder().inactive().build()

        with pytest.raises(InvalidStateError):
            member.activate()
        with pytest.raises(AttributeError):
            member.status = MemberStatus.ACTIVE

    def test_copies_can_carry_new_identity(self):
        member = MemberBuilder().build()

        stored = member.model_copy(update={"member_id": 7})

        assert stored.member_id == 7
        assert member.member_id is None
