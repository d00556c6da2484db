"""Security adapters for member management."""

from .bcrypt_password_hasher import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
