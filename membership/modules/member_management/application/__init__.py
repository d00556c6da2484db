# 📄 File: membership/modules/member_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The layer that carries out member requests step by step, using the domain rules and
# the storage / hashing / messaging helpers it is given.
# 🧪 Purpose (Technical Summary):
# Application layer exports: commands, DTOs and the use-case handlers.

from .commands import RegisterMemberCommand, UpdateMemberInfoCommand
from .dto import MemberDTO
from .handlers import MemberCommandHandler, MemberQueryHandler

__all__ = [
    "RegisterMemberCommand",
    "UpdateMemberInfoCommand",
    "MemberDTO",
    "MemberCommandHandler",
    "MemberQueryHandler",
]
