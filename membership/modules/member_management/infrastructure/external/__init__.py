"""External service adapters for member management."""

from .logging_notifier import LoggingNotifier

__all__ = ["LoggingNotifier"]
