# 📄 File: membership/modules/member_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how member information is stored in the database: one table for the
# account itself and one for the extra details (profile handle and birth date).
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the Member aggregate. The detail row is owned one-to-one by the
# member row (unique foreign key, delete-orphan cascade) so both are written in the same
# unit of work.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - membership.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - member_repository_impl.py (CRUD operations)
# - membership.shared.infrastructure.database.connection.create_schema (table creation)

"""
SQLAlchemy Models for Member Management

Models:
- MemberModel: Account data (email, nickname, password hash, status)
- MemberDetailModel: Profile handle, birth date and mirrored status
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from membership.shared.infrastructure.database.connection import Base

EMAIL_UNIQUE_CONSTRAINT = "uq_members_email"


# =============================================================================
# MEMBER MODEL
# =============================================================================

class MemberModel(Base):
    """
    SQLAlchemy model for the member account (aggregate root).

    The unique constraint on email is the authoritative duplicate check;
    the repository translates its violation into DuplicateEmailError.
    """
    __tablename__ = "members"
    __table_args__ = (
        UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),
    )

    member_id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Surrogate member identifier"
    )

    email = Column(
        String(255),
        nullable=False,
        comment="Member's email address (validated format)"
    )
    nickname = Column(
        String(100),
        nullable=False,
        comment="Display nickname"
    )
    password_hash = Column(
        String(255),
        nullable=False,
        comment="Hashed password using bcrypt"
    )
    status = Column(
        String(20),
        nullable=False,
        default="PENDING",
        comment="Lifecycle status (PENDING/ACTIVE/INACTIVE)"
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        comment="Registration date"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        comment="Last modification date"
    )

    detail = relationship(
        "MemberDetailModel",
        back_populates="member",
        uselist=False,
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<MemberModel(member_id={self.member_id}, email={self.email})>"


# =============================================================================
# MEMBER DETAIL MODEL
# =============================================================================

class MemberDetailModel(Base):
    """
    SQLAlchemy model for the member detail record.

    Exactly one row per member; the empty string in ``profile`` means no
    handle has been chosen yet.
    """
    __tablename__ = "member_details"

    member_detail_id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Detail record identifier"
    )
    member_id = Column(
        Integer,
        ForeignKey("members.member_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Owning member"
    )

    profile = Column(
        String(15),
        nullable=False,
        default="",
        index=True,
        comment="Profile handle, empty when unset"
    )
    birth_date = Column(
        Date,
        nullable=True,
        comment="Birth date"
    )
    status = Column(
        String(20),
        nullable=False,
        default="PENDING",
        comment="Mirrors the member status"
    )

    member = relationship("MemberModel", back_populates="detail")

    def __repr__(self) -> str:
        return f"<MemberDetailModel(member_id={self.member_id}, profile={self.profile})>"
