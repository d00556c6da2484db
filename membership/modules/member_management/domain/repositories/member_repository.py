# 📄 File: membership/modules/member_management/domain/repositories/member_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save and find members in storage, without specifying
# the actual database technology.
# 🧪 Purpose (Technical Summary):
# Repository interface for the Member aggregate following the Repository pattern and
# dependency inversion principle. The whole aggregate (root + detail) is loaded and
# saved as one unit.
# 🔗 Dependencies:
# Domain models (Member, Email, Profile), typing, abc
# 🔄 Connected Modules / Calls From:
# command_handlers.py, query_handlers.py, member_repository_impl.py

from abc import ABC, abstractmethod
from typing import Optional

from ..models.member import Member
from ..models.value_objects import Email, Profile


class MemberRepository(ABC):
    """
    Repository interface for Member aggregate persistence.

    Implementation Notes:
    - Concrete implementations are in the infrastructure layer
    - Methods return domain aggregates, not database models
    - save() is atomic across the root and its detail record
    - save() is the authoritative email uniqueness check and raises
      DuplicateEmailError on a conflict
    """

    @abstractmethod
    def save(self, member: Member) -> Member:
        """
        Persist a member aggregate.

        Args:
            member: Aggregate to insert (member_id is None) or update

        Returns:
            The persisted aggregate, with member_id assigned if it was new

        Raises:
            DuplicateEmailError: If another member already uses the email
            MemberNotFoundError: If an existing id no longer exists in storage
            RepositoryError: If the storage operation fails
        """

    @abstractmethod
    def find_by_id(self, member_id: int) -> Optional[Member]:
        """
        Get member by surrogate id.

        Returns:
            Member if found, None otherwise
        """

    @abstractmethod
    def find_by_email(self, email: Email) -> Optional[Member]:
        """
        Get member by email address.

        Returns:
            Member if found, None otherwise
        """

    @abstractmethod
    def find_by_profile(self, profile: Profile) -> Optional[Member]:
        """
        Get member by profile handle.

        Returns:
            The matching member with the lowest id, None otherwise
        """

    def exists_by_email(self, email: Email) -> bool:
        """
        Check if a member exists by email.

        Args:
            email: Email address to check

        Returns:
            True if a member exists, False otherwise
        """
        return self.find_by_email(email) is not None
