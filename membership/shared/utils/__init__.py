# 📄 File: membership/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A small toolbox shared by the rest of the service; today it holds the logging helpers.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the structured logging API.

from .logging import get_logger, log_context, setup_logging, StructuredLogger

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
    "StructuredLogger",
]
