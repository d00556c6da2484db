# 📄 File: membership/modules/member_management/infrastructure/database/member_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for members: saving a new or changed member
# together with their details, and finding members by number, email or profile handle.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of the MemberRepository interface using a synchronous SQLAlchemy
# session. Maps between the Member aggregate and MemberModel/MemberDetailModel rows, commits
# root and detail in one transaction, and translates the email unique-constraint violation
# into DuplicateEmailError.
#
# 🔗 Dependencies:
# - membership.modules.member_management.domain.repositories.member_repository (interface)
# - membership.modules.member_management.domain.models (aggregate and value objects)
# - membership.modules.member_management.infrastructure.database.models (SQLAlchemy models)
#
# 🔄 Connected Modules / Calls From:
# - membership.modules.member_management.dependencies (handler wiring)
# - Integration tests

"""
Member Repository Implementation

Features:
- Atomic save of the Member root and its MemberDetail
- Id, email and profile-handle lookup
- Domain model <-> SQLAlchemy model mapping
- Unique-constraint violations surfaced as DuplicateEmailError
"""

import logging
from datetime import timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from membership.modules.member_management.domain.models.member import (
    Member,
    MemberDetail,
    MemberDetailStatus,
    MemberStatus,
)
from membership.modules.member_management.domain.models.value_objects import Email, Profile
from membership.modules.member_management.domain.repositories.member_repository import MemberRepository
from membership.modules.member_management.infrastructure.database.models import (
    EMAIL_UNIQUE_CONSTRAINT,
    MemberDetailModel,
    MemberModel,
)
from membership.shared.core.exceptions import (
    DuplicateEmailError,
    MemberNotFoundError,
    RepositoryError,
)

logger = logging.getLogger(__name__)

REPOSITORY_NAME = "member_repository"


class SqlAlchemyMemberRepository(MemberRepository):
    """
    SQLAlchemy implementation of the MemberRepository interface.

    Each save() commits its own transaction. Reads issued earlier on the same
    session belong to that transaction, so a use case's lookups and its write
    are committed or rolled back together.
    """

    def __init__(self, session: Session):
        """
        Initialize the member repository.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def save(self, member: Member) -> Member:
        """
        Insert a new member or update an existing one.

        Returns:
            Member: Persisted aggregate (with generated ids on insert)

        Raises:
            DuplicateEmailError: If another member already uses the email
            MemberNotFoundError: If the member id does not exist
            RepositoryError: For other database errors
        """
        operation = "insert" if member.member_id is None else "update"
        try:
            if member.member_id is None:
                member_model = self._domain_to_model(member)
                self._session.add(member_model)
            else:
                member_model = self._session.get(MemberModel, member.member_id)
                if member_model is None:
                    raise MemberNotFoundError("id", member.member_id)
                self._update_model_from_domain(member_model, member)

            self._session.commit()

            logger.info(f"Saved member ({operation}) with ID: {member_model.member_id}")
            return self._model_to_domain(member_model)

        except MemberNotFoundError:
            self._session.rollback()
            raise

        except IntegrityError as e:
            self._session.rollback()
            if self._is_email_conflict(e):
                logger.warning(f"Member save failed - email already exists: {member.email.masked}")
                raise DuplicateEmailError(member.email.value) from e
            logger.error(f"Integrity error during member {operation}: {str(e)}")
            raise RepositoryError(
                f"Failed to save member: {str(e)}",
                repository=REPOSITORY_NAME,
                operation=operation
            ) from e

        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(f"Database error during member {operation}: {str(e)}")
            raise RepositoryError(
                f"Failed to save member: {str(e)}",
                repository=REPOSITORY_NAME,
                operation=operation
            ) from e

    def find_by_id(self, member_id: int) -> Optional[Member]:
        stmt = select(MemberModel).where(MemberModel.member_id == member_id)
        return self._find_one(stmt, f"id {member_id}", "find_by_id")

    def find_by_email(self, email: Email) -> Optional[Member]:
        stmt = select(MemberModel).where(MemberModel.email == email.value)
        return self._find_one(stmt, f"email {email.masked}", "find_by_email")

    def find_by_profile(self, profile: Profile) -> Optional[Member]:
        """
        Retrieve the member using a profile handle.

        Handles are not unique; the member with the lowest id wins. The unset
        handle never matches.
        """
        if not profile.is_set:
            return None

        stmt = (
            select(MemberModel)
            .join(MemberDetailModel, MemberDetailModel.member_id == MemberModel.member_id)
            .where(MemberDetailModel.profile == profile.value)
            .order_by(MemberModel.member_id)
            .limit(1)
        )
        return self._find_one(stmt, f"profile {profile.value}", "find_by_profile")

    # =========================================================================
    # INTERNAL
    # =========================================================================

    def _find_one(self, stmt, description: str, operation: str) -> Optional[Member]:
        try:
            member_model = self._session.execute(stmt).scalars().first()

            if member_model:
                logger.debug(f"Retrieved member by {description}")
                return self._model_to_domain(member_model)

            logger.debug(f"Member not found by {description}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving member by {description}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve member: {str(e)}",
                repository=REPOSITORY_NAME,
                operation=operation
            ) from e

    @staticmethod
    def _is_email_conflict(error: IntegrityError) -> bool:
        text = str(error.orig).lower()
        return EMAIL_UNIQUE_CONSTRAINT in text or "members.email" in text

    def _domain_to_model(self, member: Member) -> MemberModel:
        """Convert a new domain aggregate to SQLAlchemy models."""
        member_model = MemberModel(
            email=member.email.value,
            nickname=member.nickname,
            password_hash=member.password_hash,
            status=member.status.value,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )
        member_model.detail = MemberDetailModel(
            profile=member.detail.profile.value,
            birth_date=member.detail.birth_date,
            status=member.detail.status.value,
        )
        return member_model

    def _model_to_domain(self, member_model: MemberModel) -> Member:
        """Convert SQLAlchemy models to the domain aggregate."""
        detail_model = member_model.detail
        if detail_model is None:
            detail = MemberDetail._create()
        else:
            detail = MemberDetail(
                detail_id=detail_model.member_detail_id,
                profile=Profile(detail_model.profile),
                birth_date=detail_model.birth_date,
                status=MemberDetailStatus(detail_model.status),
            )

        return Member(
            member_id=member_model.member_id,
            email=Email(member_model.email),
            nickname=member_model.nickname,
            password_hash=member_model.password_hash,
            status=MemberStatus(member_model.status),
            detail=detail,
            created_at=self._as_utc(member_model.created_at),
            updated_at=self._as_utc(member_model.updated_at),
        )

    def _update_model_from_domain(self, member_model: MemberModel, member: Member) -> None:
        """Copy the aggregate state onto existing SQLAlchemy models."""
        member_model.email = member.email.value
        member_model.nickname = member.nickname
        member_model.password_hash = member.password_hash
        member_model.status = member.status.value
        member_model.updated_at = member.updated_at

        if member_model.detail is None:
            member_model.detail = MemberDetailModel()
        member_model.detail.profile = member.detail.profile.value
        member_model.detail.birth_date = member.detail.birth_date
        member_model.detail.status = member.detail.status.value

    @staticmethod
    def _as_utc(value):
        # SQLite drops tzinfo on the way back
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
