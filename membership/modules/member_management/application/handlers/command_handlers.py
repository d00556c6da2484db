# 📄 File: membership/modules/member_management/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "action processor" for member requests: signing someone up, switching their account
# on or off, and saving edits to their details, making sure each step happens in the
# right order and nothing is half-saved.
#
# 🧪 Purpose (Technical Summary):
# Use-case orchestration for the Member aggregate. Sequences the duplicate-email
# pre-check, aggregate construction or mutation, atomic persistence through the
# repository port, and best-effort welcome notification.
#
# 🔗 Dependencies:
# - membership.modules.member_management.domain (aggregate and ports)
# - membership.modules.member_management.application.commands (inputs)
# - membership.shared.utils.logging (structured business event logging)
#
# 🔄 Connected Modules / Calls From:
# - membership.modules.member_management.dependencies (production wiring)
# - Transport adapters invoking the inbound member use cases

__all__ = [
    "MemberCommandHandler",
]

from typing import Optional

from membership.shared.config.settings import Settings, get_settings
from membership.shared.core.exceptions import DuplicateEmailError, MemberNotFoundError
from membership.shared.utils.logging import get_logger

from ..commands.register_member import RegisterMemberCommand
from ..commands.update_member_info import UpdateMemberInfoCommand
from ...domain.models.member import Member
from ...domain.models.value_objects import Email
from ...domain.repositories.member_repository import MemberRepository
from ...domain.services.notifier import Notifier
from ...domain.services.password_hasher import PasswordHasher

logger = get_logger(__name__)


class MemberCommandHandler:
    """
    Handles the member write use cases: register, activate, deactivate, update_info.

    Each operation touches exactly one aggregate. Errors raised by the
    aggregate or the repository propagate unchanged; the only failure that
    is swallowed is the welcome notification.
    """

    def __init__(
        self,
        member_repository: MemberRepository,
        password_hasher: PasswordHasher,
        notifier: Notifier,
        settings: Optional[Settings] = None,
    ):
        self._member_repository = member_repository
        self._password_hasher = password_hasher
        self._notifier = notifier
        self._settings = settings or get_settings()

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register(self, command: RegisterMemberCommand) -> Member:
        """
        Register a new member.

        Steps:
        1. Reject the email if a member already uses it (pre-check only; the
           repository's unique constraint is the real guarantee)
        2. Build the PENDING aggregate through the Member factory
        3. Save root and detail atomically
        4. Send the welcome message, ignoring any failure

        Args:
            command: Registration input

        Returns:
            The persisted member

        Raises:
            ValidationError: If email, nickname or password is invalid
            DuplicateEmailError: If the email is already registered
        """
        email = Email(command.email)
        logger.info(f"Starting member registration for email: {email.masked}")

        if self._member_repository.find_by_email(email) is not None:
            logger.warning(f"Registration rejected, email already registered: {email.masked}")
            raise DuplicateEmailError(email.value)

        member = Member.register(command, self._password_hasher)
        saved = self._member_repository.save(member)

        logger.log_business_event(
            "member_registered",
            f"Member registered: {saved.member_id}",
            entity_id=saved.member_id,
            entity_type="member",
        )

        self._send_welcome(saved)
        return saved

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def activate(self, member_id: int) -> Member:
        """
        Activate a PENDING member.

        Raises:
            MemberNotFoundError: If no member has this id
            InvalidStateError: If the member is not PENDING
        """
        member = self._load(member_id)
        member.activate()
        saved = self._member_repository.save(member)

        logger.log_business_event(
            "member_activated",
            f"Member activated: {member_id}",
            entity_id=member_id,
            entity_type="member",
        )
        return saved

    def deactivate(self, member_id: int) -> Member:
        """
        Deactivate an ACTIVE member.

        Raises:
            MemberNotFoundError: If no member has this id
            InvalidStateError: If the member is not ACTIVE
        """
        member = self._load(member_id)
        member.deactivate()
        saved = self._member_repository.save(member)

        logger.log_business_event(
            "member_deactivated",
            f"Member deactivated: {member_id}",
            entity_id=member_id,
            entity_type="member",
        )
        return saved

    def update_info(self, member_id: int, command: UpdateMemberInfoCommand) -> Member:
        """
        Replace nickname, profile handle and birth date of an ACTIVE member.

        Raises:
            MemberNotFoundError: If no member has this id
            InvalidStateError: If the member is not ACTIVE
            ValidationError: If the nickname is missing or the profile is malformed
        """
        member = self._load(member_id)
        member.update_info(command)
        saved = self._member_repository.save(member)

        logger.log_business_event(
            "member_info_updated",
            f"Member info updated: {member_id}",
            entity_id=member_id,
            entity_type="member",
            extra={"profile": saved.detail.profile.value},
        )
        return saved

    # =========================================================================
    # INTERNAL
    # =========================================================================

    def _load(self, member_id: int) -> Member:
        member = self._member_repository.find_by_id(member_id)
        if member is None:
            logger.warning(f"Member not found: {member_id}")
            raise MemberNotFoundError("id", member_id)
        return member

    def _send_welcome(self, member: Member) -> None:
        """Best-effort welcome message; a failure never undoes the registration."""
        if not self._settings.NOTIFICATIONS_ENABLED:
            logger.debug(f"Notifications disabled, skipping welcome for member {member.member_id}")
            return

        subject = self._settings.WELCOME_EMAIL_SUBJECT
        body = (
            f"Hi {member.nickname},\n\n"
            f"Thanks for registering with {self._settings.APP_NAME}. "
            f"Your account is waiting for activation."
        )

        try:
            self._notifier.send(member.email, subject, body)
        except Exception as e:
            logger.warning(
                f"Welcome notification failed for member {member.member_id}: {e}",
                exc_info=True,
                member_id=member.member_id,
            )
