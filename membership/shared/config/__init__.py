# 📄 File: membership/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the membership service which database to use,
# how much to log and whether to send welcome messages.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the pydantic-settings model and its factory.

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
