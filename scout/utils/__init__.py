"""
Shared utilities for SCOUT.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Timestamps for output naming
- Plain-text report tables
"""

from scout.utils.timestamp import now, now_exact

__all__ = ["now", "now_exact"]
