# 📄 File: membership/modules/member_management/domain/models/value_objects.py
# 🧭 Purpose (Layman Explanation):
# Defines the small, always-correct building blocks of a member: a checked email address
# and a checked profile handle (the "@name" other people see).
# 🧪 Purpose (Technical Summary):
# Immutable, self-validating value objects built on frozen pydantic models. Construction
# either yields a fully valid instance or raises the project ValidationError.
# 🔗 Dependencies:
# pydantic, re, membership.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# member.py (aggregate), command/query handlers, repository implementations

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from membership.shared.core.exceptions import ValidationError


class Email(BaseModel):
    """
    Email value object.

    The address is kept exactly as given; equality is by value.
    """

    model_config = ConfigDict(frozen=True)

    EMAIL_REGEX: ClassVar[re.Pattern] = re.compile(
        r'^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$'
    )

    value: str

    def __init__(self, value: str, **data):
        super().__init__(value=value, **data)

    @field_validator('value', mode='before')
    @classmethod
    def validate_value(cls, v):
        """Reject empty or malformed addresses."""
        if v is None or v == "":
            raise ValidationError("Email is required", field="email", constraint="required")
        if not isinstance(v, str) or not cls.EMAIL_REGEX.fullmatch(v):
            raise ValidationError(
                "Invalid email format",
                field="email",
                value=v,
                constraint="pattern"
            )
        return v

    @property
    def local_part(self) -> str:
        return self.value.split('@')[0]

    @property
    def domain(self) -> str:
        return self.value.split('@')[1]

    @property
    def masked(self) -> str:
        """Log-safe form, e.g. ``f***@example.com``."""
        return f"{self.local_part[0]}***@{self.domain}"

    def __str__(self) -> str:
        return self.value


class Profile(BaseModel):
    """
    Profile handle value object.

    The empty string is the "no profile chosen" sentinel. A non-empty handle
    consists of letters, digits, dots, underscores and hyphens and is at most
    MAX_LENGTH characters long.
    """

    model_config = ConfigDict(frozen=True)

    MAX_LENGTH: ClassVar[int] = 15
    PROFILE_REGEX: ClassVar[re.Pattern] = re.compile(r'^[A-Za-z0-9._-]+$')

    value: str = ""

    def __init__(self, value: str = "", **data):
        super().__init__(value=value, **data)

    @field_validator('value', mode='before')
    @classmethod
    def validate_value(cls, v):
        if v is None or v == "":
            return ""
        if not isinstance(v, str):
            raise ValidationError("Profile must be a string", field="profile", value=v)
        if len(v) > cls.MAX_LENGTH:
            raise ValidationError(
                f"Profile cannot exceed {cls.MAX_LENGTH} characters",
                field="profile",
                value=v,
                constraint="max_length"
            )
        if not cls.PROFILE_REGEX.fullmatch(v):
            raise ValidationError(
                "Profile may only contain letters, digits, '.', '_' and '-'",
                field="profile",
                value=v,
                constraint="pattern"
            )
        return v

    @classmethod
    def unset(cls) -> "Profile":
        return cls("")

    @property
    def is_set(self) -> bool:
        return self.value != ""

    @property
    def display(self) -> str:
        """Display form shown to other members, e.g. ``@green_thumb``."""
        return "@" + self.value

    def __str__(self) -> str:
        return self.value
