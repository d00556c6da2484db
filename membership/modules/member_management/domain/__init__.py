# 📄 File: membership/modules/member_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The heart of the member module: what a member is and the rules it must always follow.
# 🧪 Purpose (Technical Summary):
# Domain layer package exporting the aggregate, value objects and port interfaces.

from .models import (
    Email,
    Member,
    MemberDetail,
    MemberDetailStatus,
    MemberStatus,
    Profile,
)
from .repositories import MemberRepository
from .services import Notifier, PasswordHasher

__all__ = [
    "Email",
    "Member",
    "MemberDetail",
    "MemberDetailStatus",
    "MemberStatus",
    "Profile",
    "MemberRepository",
    "Notifier",
    "PasswordHasher",
]
