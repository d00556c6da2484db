# 📄 File: membership/modules/member_management/application/commands/register_member.py
# 🧭 Purpose (Layman Explanation):
# The "sign me up" request: the email, nickname and password someone gives when they
# register as a new member.
#
# 🧪 Purpose (Technical Summary):
# Command object for the registration use case. Fields are optional at the type level so
# that the Member factory, not pydantic, decides what is missing and raises the
# project ValidationError.
#
# 🔄 Connected Modules / Calls From:
# - command_handlers.py (MemberCommandHandler.register)
# - member.py (Member.register reads email / nickname / password)

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterMemberCommand(BaseModel):
    """Command for registering a new member."""

    email: Optional[str] = Field(
        default=None,
        description="Member's email address",
        examples=["member@example.com"]
    )
    nickname: Optional[str] = Field(
        default=None,
        description="Display nickname",
        examples=["Fern"]
    )
    password: Optional[str] = Field(
        default=None,
        description="Raw password (hashed before it is stored)",
        repr=False
    )

    model_config = ConfigDict(frozen=True)
