# 📄 File: membership/modules/member_management/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "information retriever" for members: finds a member by number, email address or
# profile handle, and says clearly when nobody matches.
#
# 🧪 Purpose (Technical Summary):
# Read-only lookups through the repository port. Raw inputs are validated into value
# objects first; a missing match raises MemberNotFoundError. Nothing is ever mutated.
#
# 🔄 Connected Modules / Calls From:
# - membership.modules.member_management.dependencies (production wiring)
# - Transport adapters serving member lookups

import logging

from membership.shared.core.exceptions import MemberNotFoundError

from ...domain.models.member import Member
from ...domain.models.value_objects import Email, Profile
from ...domain.repositories.member_repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberQueryHandler:
    """Read-only member lookups."""

    def __init__(self, member_repository: MemberRepository):
        self._member_repository = member_repository

    def find_by_id(self, member_id: int) -> Member:
        member = self._member_repository.find_by_id(member_id)
        if member is None:
            logger.debug(f"Member not found by id: {member_id}")
            raise MemberNotFoundError("id", member_id)
        return member

    def find_by_email(self, email: str) -> Member:
        """
        Raises:
            ValidationError: If the email is empty or malformed
            MemberNotFoundError: If no member uses the email
        """
        address = Email(email)
        member = self._member_repository.find_by_email(address)
        if member is None:
            logger.debug(f"Member not found by email: {address.masked}")
            raise MemberNotFoundError("email", email)
        return member

    def find_by_profile(self, profile: str) -> Member:
        """
        Look a member up by profile handle.

        The unset handle never identifies a member.

        Raises:
            ValidationError: If the handle is malformed or too long
            MemberNotFoundError: If no member uses the handle
        """
        handle = Profile(profile)
        member = self._member_repository.find_by_profile(handle) if handle.is_set else None
        if member is None:
            logger.debug(f"Member not found by profile: {profile!r}")
            raise MemberNotFoundError("profile", profile)
        return member
