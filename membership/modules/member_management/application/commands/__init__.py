"""
Member Management Commands

- RegisterMemberCommand: registration input
- UpdateMemberInfoCommand: nickname / profile / birth date update input
"""

from .register_member import RegisterMemberCommand
from .update_member_info import UpdateMemberInfoCommand

__all__ = [
    "RegisterMemberCommand",
    "UpdateMemberInfoCommand",
]
