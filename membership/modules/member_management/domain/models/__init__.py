# 📄 File: membership/modules/member_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core member data models: the member itself, its detail record and the
# checked email / profile handle values.
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models: Member aggregate root, MemberDetail child
# record, status enumerations and the Email / Profile value objects.

"""
Member Management Domain Models

Models:
- Member: Aggregate root with the PENDING -> ACTIVE -> INACTIVE lifecycle
- MemberDetail: Owned record with profile handle, birth date and mirrored status
- Email / Profile: Immutable, self-validating value objects
"""

from .value_objects import Email, Profile
from .member import (
    Member,
    MemberDetail,
    MemberDetailStatus,
    MemberStatus,
)

__all__ = [
    "Email",
    "Profile",
    "Member",
    "MemberDetail",
    "MemberDetailStatus",
    "MemberStatus",
]
