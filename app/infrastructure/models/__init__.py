"""Persistence table definitions."""

from .directory_item import build_directory_item_table

__all__ = ["build_directory_item_table"]
