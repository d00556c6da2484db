# 📄 File: membership/modules/member_management/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Puts the member pieces together: gives the request handlers a database connection, the
# password scrambler and the message sender, so callers only ask for a ready handler.
# 🧪 Purpose (Technical Summary):
# Composition root for the member_management module. Binds the domain ports to their
# production adapters for a given SQLAlchemy session.
# 🔗 Dependencies:
# application.handlers, infrastructure adapters, membership.shared.config.settings
# 🔄 Connected Modules / Calls From:
# Transport adapters and scripts that run member use cases, integration tests

"""
Member Management Module Dependencies

Usage:
    manager = DatabaseSessionManager()
    manager.initialize()
    with manager.get_session() as session:
        handler = build_member_command_handler(session)
        member = handler.register(RegisterMemberCommand(...))
"""

from typing import Optional

from sqlalchemy.orm import Session

from membership.modules.member_management.application.handlers import (
    MemberCommandHandler,
    MemberQueryHandler,
)
from membership.modules.member_management.infrastructure.database.member_repository_impl import (
    SqlAlchemyMemberRepository,
)
from membership.modules.member_management.infrastructure.external.logging_notifier import LoggingNotifier
from membership.modules.member_management.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from membership.shared.config.settings import Settings, get_settings


def build_member_command_handler(
    session: Session,
    settings: Optional[Settings] = None
) -> MemberCommandHandler:
    """Command handler wired to the SQLAlchemy repository, bcrypt and the logging notifier."""
    settings = settings or get_settings()
    return MemberCommandHandler(
        member_repository=SqlAlchemyMemberRepository(session),
        password_hasher=BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        notifier=LoggingNotifier(sender=settings.MAIL_SENDER),
        settings=settings,
    )


def build_member_query_handler(session: Session) -> MemberQueryHandler:
    return MemberQueryHandler(SqlAlchemyMemberRepository(session))
