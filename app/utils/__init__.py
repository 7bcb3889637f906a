"""Utility helpers for reusable functionality."""

from .datetime import ensure_utc, now_utc, parse_iso8601, to_iso8601

__all__ = ["ensure_utc", "now_utc", "parse_iso8601", "to_iso8601"]
