"""Timestamp helpers for naming scan outputs and log sessions."""

from datetime import datetime


def now() -> str:
    """Compact local timestamp for file and directory names (e.g., 20251114_183040)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """ISO 8601 local timestamp with microseconds."""
    return datetime.now().isoformat()
