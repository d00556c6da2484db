# 📄 File: membership/modules/member_management/application/dto/member_dto.py
# 🧭 Purpose (Layman Explanation):
# A safe, read-only package of member information that can be handed to other parts of
# the system (or to a web layer) without ever exposing the stored password.
#
# 🧪 Purpose (Technical Summary):
# Transport-neutral data transfer object built from the Member aggregate, with JSON-ready
# serialization and the password hash always filtered out.
#
# 🔄 Connected Modules / Calls From:
# - Transport adapters mapping handler results to responses
# - Tests asserting on the public member shape

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.member import Member, MemberStatus


class MemberDTO(BaseModel):
    """
    Public view of a member.

    The password hash is never part of this DTO.
    """

    member_id: Optional[int] = Field(..., description="Surrogate member identifier")
    email: str = Field(..., description="Member's email address")
    nickname: str = Field(..., description="Display nickname")
    status: MemberStatus = Field(..., description="Lifecycle status")
    profile: str = Field(default="", description="Profile handle, empty when unset")
    profile_display: Optional[str] = Field(
        default=None,
        description="Display form of the profile handle, e.g. @green_thumb"
    )
    birth_date: Optional[date] = Field(default=None, description="Birth date")
    created_at: datetime = Field(..., description="Registration timestamp")
    updated_at: datetime = Field(..., description="Last modification timestamp")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, member: Member) -> "MemberDTO":
        """
        Build the DTO from a Member aggregate.

        Args:
            member: Aggregate to expose

        Returns:
            MemberDTO without sensitive fields
        """
        profile = member.detail.profile
        return cls(
            member_id=member.member_id,
            email=member.email.value,
            nickname=member.nickname,
            status=member.status,
            profile=profile.value,
            profile_display=profile.display if profile.is_set else None,
            birth_date=member.detail.birth_date,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )
