"""Member Management Data Transfer Objects"""

from .member_dto import MemberDTO

__all__ = [
    "MemberDTO",
]
