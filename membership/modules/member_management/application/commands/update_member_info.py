# 📄 File: membership/modules/member_management/application/commands/update_member_info.py
# 🧭 Purpose (Layman Explanation):
# The "edit my details" request: a new nickname, profile handle and birth date.
#
# 🧪 Purpose (Technical Summary):
# Command object for the info update use case. A missing profile means "no profile
# chosen"; a missing nickname is rejected by the Member aggregate.
#
# 🔄 Connected Modules / Calls From:
# - command_handlers.py (MemberCommandHandler.update_info)
# - member.py (Member.update_info)

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UpdateMemberInfoCommand(BaseModel):
    """Command for replacing a member's nickname, profile handle and birth date."""

    nickname: Optional[str] = Field(
        default=None,
        description="New nickname (required)",
        examples=["Fern"]
    )
    profile: Optional[str] = Field(
        default=None,
        description="Profile handle, letters/digits/'.'/'_'/'-', at most 15 chars",
        examples=["green_thumb"]
    )
    birth_date: Optional[date] = Field(
        default=None,
        description="Birth date (optional)",
        examples=["1990-04-12"]
    )

    model_config = ConfigDict(frozen=True)
