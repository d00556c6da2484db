# 📄 File: membership/modules/member_management/domain/services/password_hasher.py
# 🧭 Purpose (Layman Explanation):
# Describes the job of scrambling a password so it can be stored safely, and of checking a
# typed password against the scrambled version, without saying which algorithm does it.
# 🧪 Purpose (Technical Summary):
# Password hashing port consumed by the Member factory; concrete adapters live in the
# infrastructure layer.
# 🔗 Dependencies:
# abc
# 🔄 Connected Modules / Calls From:
# member.py (Member.register, Member.matches_password), bcrypt_password_hasher.py

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Capability that turns a plaintext credential into an opaque stored hash."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            Opaque credential suitable for storage
        """

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored credential.

        Returns:
            True if the password matches
        """
