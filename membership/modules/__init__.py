"""Feature modules of the membership service."""
