"""
Member Management Domain Service Ports

- PasswordHasher: credential hashing used by the Member factory
- Notifier: best-effort outbound messages
"""

from .password_hasher import PasswordHasher
from .notifier import Notifier

__all__ = [
    "PasswordHasher",
    "Notifier",
]
