"""Database adapters for member management."""

from .member_repository_impl import SqlAlchemyMemberRepository
from .models import MemberDetailModel, MemberModel

__all__ = [
    "MemberDetailModel",
    "MemberModel",
    "SqlAlchemyMemberRepository",
]
