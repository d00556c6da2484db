# 📄 File: membership/modules/member_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The concrete helpers the member rules rely on: the database, password scrambling and
# outgoing messages.
# 🧪 Purpose (Technical Summary):
# Adapters implementing the domain ports (MemberRepository, PasswordHasher, Notifier).

from .database import MemberDetailModel, MemberModel, SqlAlchemyMemberRepository
from .external import LoggingNotifier
from .security import BcryptPasswordHasher

__all__ = [
    "BcryptPasswordHasher",
    "LoggingNotifier",
    "MemberDetailModel",
    "MemberModel",
    "SqlAlchemyMemberRepository",
]
