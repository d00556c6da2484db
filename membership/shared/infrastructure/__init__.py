"""Shared infrastructure components (database)."""
