"""
Member Management Handlers

- MemberCommandHandler: register / activate / deactivate / update_info
- MemberQueryHandler: find_by_id / find_by_email / find_by_profile
"""

from .command_handlers import MemberCommandHandler
from .query_handlers import MemberQueryHandler

__all__ = [
    "MemberCommandHandler",
    "MemberQueryHandler",
]
