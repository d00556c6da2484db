# 📄 File: membership/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that every part
# of the membership service can use, like configuration, errors, logging and the database.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for cross-cutting concerns used by the
# member management module.

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Exception hierarchy with stable error codes
- Structured logging
- Database engine and session management
"""

__all__ = []
