# 📄 File: membership/modules/member_management/infrastructure/security/bcrypt_password_hasher.py
# 🧭 Purpose (Layman Explanation):
# Scrambles passwords with bcrypt before they are stored, and checks a typed password
# against the scrambled version later, so real passwords are never kept.
#
# 🧪 Purpose (Technical Summary):
# PasswordHasher adapter backed by a passlib CryptContext using the bcrypt scheme. The
# work factor comes from BCRYPT_ROUNDS unless passed explicitly.
#
# 🔗 Dependencies:
# - passlib (CryptContext, bcrypt backend)
# - membership.shared.config.settings (BCRYPT_ROUNDS)
#
# 🔄 Connected Modules / Calls From:
# - membership.modules.member_management.dependencies (handler wiring)

import logging
from typing import Optional

from passlib.context import CryptContext

from membership.modules.member_management.domain.services.password_hasher import PasswordHasher
from membership.shared.config.settings import get_settings

logger = logging.getLogger(__name__)


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt password hashing via passlib."""

    def __init__(self, rounds: Optional[int] = None):
        self.rounds = rounds if rounds is not None else get_settings().BCRYPT_ROUNDS
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self.rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            str: Hashed password
        """
        try:
            hashed = self._context.hash(password)
            logger.debug("Password hashed successfully")
            return hashed
        except Exception as e:
            logger.error(f"Password hashing failed: {e}")
            raise

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Verify password against hash.

        Malformed or foreign hashes count as a mismatch.
        """
        try:
            is_valid = self._context.verify(password, password_hash)
            if is_valid:
                logger.debug("Password verification successful")
            else:
                logger.debug("Password verification failed")
            return is_valid
        except (ValueError, TypeError) as e:
            logger.error(f"Password verification error: {e}")
            return False
