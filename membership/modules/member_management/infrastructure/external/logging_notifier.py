# 📄 File: membership/modules/member_management/infrastructure/external/logging_notifier.py
# 🧭 Purpose (Layman Explanation):
# A stand-in "post office" that writes outgoing member messages to the log instead of
# sending real email, so registrations work before a mail provider is hooked up.
#
# 🧪 Purpose (Technical Summary):
# Notifier adapter that records each message as a structured log event. Delivery to a real
# mail provider is out of scope; swapping adapters needs no change in the handlers.
#
# 🔗 Dependencies:
# - membership.shared.utils.logging (StructuredLogger)
# - membership.shared.config.settings (MAIL_SENDER)
#
# 🔄 Connected Modules / Calls From:
# - membership.modules.member_management.dependencies (handler wiring)

from typing import Optional

from membership.modules.member_management.domain.models.value_objects import Email
from membership.modules.member_management.domain.services.notifier import Notifier
from membership.shared.config.settings import get_settings
from membership.shared.utils.logging import get_logger

logger = get_logger(__name__)


class LoggingNotifier(Notifier):
    """Notifier that logs messages instead of delivering them."""

    def __init__(self, sender: Optional[str] = None):
        self.sender = sender or get_settings().MAIL_SENDER

    def send(self, email: Email, subject: str, body: str) -> None:
        logger.info(
            f"Sending message to {email.masked}: {subject}",
            event_type="notification",
            sender=self.sender,
            recipient=email.masked,
            subject=subject,
            body_length=len(body),
        )
