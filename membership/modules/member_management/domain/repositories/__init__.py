"""
Member Management Domain Repositories

Repository interfaces only; concrete implementations live in the
infrastructure layer.
"""

from .member_repository import MemberRepository

__all__ = [
    "MemberRepository",
]
