# 📄 File: membership/modules/member_management/domain/models/member.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "member" is: their email, nickname, stored password and account status,
# plus a detail record with their profile handle and birth date. It also holds the rules
# about when an account may be switched on, switched off or edited.
# 🧪 Purpose (Technical Summary):
# Member aggregate root and its owned MemberDetail child record. The root is the only
# mutation surface and enforces the PENDING -> ACTIVE -> INACTIVE state machine; the
# child's lifecycle methods are module-private and only called by the root.
# 🔗 Dependencies:
# pydantic, datetime, enum, value_objects.py, domain/services/password_hasher.py,
# membership.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# command_handlers.py, query_handlers.py, member_repository_impl.py, member_dto.py

from contextlib import contextmanager
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from membership.shared.core.exceptions import InvalidStateError, ValidationError
from ..services.password_hasher import PasswordHasher
from .value_objects import Email, Profile


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemberStatus(str, Enum):
    """Member lifecycle status"""
    PENDING = "PENDING"      # Registered, not yet activated
    ACTIVE = "ACTIVE"        # Activated, profile may be edited
    INACTIVE = "INACTIVE"    # Deactivated, terminal


class MemberDetailStatus(str, Enum):
    """Status of the detail record, always moved in lockstep with MemberStatus"""
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class RegistrationRequest(Protocol):
    """Shape of the input accepted by Member.register."""
    email: Optional[str]
    nickname: Optional[str]
    password: Optional[str]


class InfoUpdateRequest(Protocol):
    """Shape of the input accepted by Member.update_info."""
    nickname: Optional[str]
    profile: Optional[str]
    birth_date: Optional[date]


class _LifecycleModel(BaseModel):
    """
    Model whose fields can only be assigned inside ``_mutation()``.

    Construction and copying are unaffected; plain attribute assignment
    from outside the model's own methods raises AttributeError.
    """

    _unlocked: bool = PrivateAttr(default=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self).model_fields and not self._unlocked:
            raise AttributeError(
                f"{type(self).__name__}.{name} is read-only; use the lifecycle methods"
            )
        super().__setattr__(name, value)

    @contextmanager
    def _mutation(self) -> Iterator[None]:
        previous = self._unlocked
        self._unlocked = True
        try:
            yield
        finally:
            self._unlocked = previous


class MemberDetail(_LifecycleModel):
    """
    Secondary member data owned by exactly one Member.

    The underscore-prefixed methods below are private to this module: only
    the Member aggregate root calls them, and it checks every precondition
    before doing so.
    """

    detail_id: Optional[int] = None
    profile: Profile = Field(default_factory=Profile.unset)
    birth_date: Optional[date] = None
    status: MemberDetailStatus = MemberDetailStatus.PENDING

    model_config = ConfigDict(validate_assignment=True)

    @classmethod
    def _create(cls) -> "MemberDetail":
        return cls(profile=Profile.unset(), birth_date=None, status=MemberDetailStatus.PENDING)

    def _activate(self) -> None:
        with self._mutation():
            self.status = MemberDetailStatus.ACTIVE

    def _deactivate(self) -> None:
        with self._mutation():
            self.status = MemberDetailStatus.INACTIVE

    def _update_info(self, profile: Profile, birth_date: Optional[date]) -> None:
        with self._mutation():
            self.profile = profile
            self.birth_date = birth_date


class Member(_LifecycleModel):
    """
    Member aggregate root.

    Fields:
    - member_id: surrogate identity, assigned by the repository on first save
    - email: unique natural key
    - nickname: display name chosen at registration
    - password_hash: credential produced by the PasswordHasher port
    - status: lifecycle status (PENDING -> ACTIVE -> INACTIVE)
    - detail: owned MemberDetail (profile handle, birth date, mirrored status)

    Every mutation goes through the lifecycle methods on this class. Each of
    them checks its precondition first and raises InvalidStateError without
    touching any field when the check fails.
    """

    member_id: Optional[int] = None
    email: Email
    nickname: str
    password_hash: str
    status: MemberStatus = MemberStatus.PENDING
    detail: MemberDetail = Field(default_factory=MemberDetail._create)

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    model_config = ConfigDict(validate_assignment=True)

    # =========================================================================
    # FACTORY
    # =========================================================================

    @classmethod
    def register(
        cls,
        request: RegistrationRequest,
        password_hasher: PasswordHasher
    ) -> "Member":
        """
        Create a new PENDING member together with its detail record.

        Args:
            request: Registration input (email, nickname, password)
            password_hasher: Port used to turn the plaintext password into a stored hash

        Returns:
            New, unsaved Member

        Raises:
            ValidationError: If the email is empty/malformed or the nickname
                or password is missing
        """
        email = Email(request.email)
        nickname = cls._require_nickname(request.nickname)

        if not request.password:
            raise ValidationError("Password is required", field="password", constraint="required")

        password_hash = password_hasher.hash(request.password)

        now = _utcnow()
        return cls(
            email=email,
            nickname=nickname,
            password_hash=password_hash,
            status=MemberStatus.PENDING,
            detail=MemberDetail._create(),
            created_at=now,
            updated_at=now,
        )

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def activate(self) -> None:
        """PENDING -> ACTIVE, cascaded to the detail record."""
        self._require_status(MemberStatus.PENDING, "activate")

        with self._mutation():
            self.status = MemberStatus.ACTIVE
            self.detail._activate()
            self._touch()

    def deactivate(self) -> None:
        """ACTIVE -> INACTIVE, cascaded to the detail record."""
        self._require_status(MemberStatus.ACTIVE, "deactivate")

        with self._mutation():
            self.status = MemberStatus.INACTIVE
            self.detail._deactivate()
            self._touch()

    def update_info(self, request: InfoUpdateRequest) -> None:
        """
        Replace nickname, profile handle and birth date.

        Only allowed while ACTIVE. All inputs are validated before anything
        is assigned.

        Raises:
            InvalidStateError: If the member is not ACTIVE
            ValidationError: If the nickname is missing or the profile is malformed
        """
        self._require_status(MemberStatus.ACTIVE, "update_info")

        nickname = self._require_nickname(request.nickname)
        profile = Profile(request.profile)

        with self._mutation():
            self.nickname = nickname
            self.detail._update_info(profile, request.birth_date)
            self._touch()

    # =========================================================================
    # QUERIES
    # =========================================================================

    def is_pending(self) -> bool:
        return self.status == MemberStatus.PENDING

    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE

    def is_inactive(self) -> bool:
        return self.status == MemberStatus.INACTIVE

    def matches_password(self, password: str, password_hasher: PasswordHasher) -> bool:
        """Check a plaintext password against the stored hash."""
        return password_hasher.verify(password, self.password_hash)

    def to_dict(self, include_sensitive: bool = False) -> Dict[str, Any]:
        """
        Convert member to a flat dictionary.

        Args:
            include_sensitive: Whether to include the password hash

        Returns:
            Member data as dictionary
        """
        data = {
            "member_id": self.member_id,
            "email": self.email.value,
            "nickname": self.nickname,
            "status": self.status.value,
            "profile": self.detail.profile.value,
            "birth_date": self.detail.birth_date,
            "detail_status": self.detail.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

        if include_sensitive:
            data["password_hash"] = self.password_hash

        return data

    # =========================================================================
    # INTERNAL
    # =========================================================================

    def _require_status(self, required: MemberStatus, operation: str) -> None:
        if self.status != required:
            raise InvalidStateError(
                f"Member is not in {required.value} state",
                operation=operation,
                current_status=self.status.value,
                required_status=required.value,
            )

    @staticmethod
    def _require_nickname(nickname: Optional[str]) -> str:
        if nickname is None or not nickname.strip():
            raise ValidationError("Nickname is required", field="nickname", constraint="required")
        return nickname

    def _touch(self) -> None:
        self.updated_at = _utcnow()
