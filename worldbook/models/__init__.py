"""Pydantic schemas for world book records"""

from .entry import (
    WorldBookEntry,
    EntryExtensions,
    EntryLevel,
    DEFAULT_ENTRY_SETTINGS,
    POSITION_CODES,
)
from .world_book import WorldBook

__all__ = [
    # Entry
    "WorldBookEntry",
    "EntryExtensions",
    "EntryLevel",
    "DEFAULT_ENTRY_SETTINGS",
    "POSITION_CODES",
    # Container
    "WorldBook",
]
