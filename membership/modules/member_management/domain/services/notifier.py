# 📄 File: membership/modules/member_management/domain/services/notifier.py
# 🧭 Purpose (Layman Explanation):
# Describes the job of sending a message to a member (for example the welcome email),
# without saying how the message is actually delivered.
# 🧪 Purpose (Technical Summary):
# Outbound notification port. Dispatch is best effort: callers treat any failure as
# non-fatal and never roll back their own work because of it.
# 🔗 Dependencies:
# abc, value_objects.py
# 🔄 Connected Modules / Calls From:
# command_handlers.py (welcome message), logging_notifier.py

from abc import ABC, abstractmethod

from ..models.value_objects import Email


class Notifier(ABC):
    """Best-effort outbound message dispatch."""

    @abstractmethod
    def send(self, email: Email, subject: str, body: str) -> None:
        """
        Send a message to a member.

        Args:
            email: Recipient address
            subject: Message subject
            body: Message body
        """
