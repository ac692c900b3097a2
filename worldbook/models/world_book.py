"""World book container model"""

import json
from typing import Dict, List, Optional, Any
from pydantic import BaseModel, Field

from .entry import WorldBookEntry, EntryLevel


class WorldBook(BaseModel):
    """All entries of one conversion, keyed by stringified uid"""
    entries: Dict[str, WorldBookEntry] = Field(default_factory=dict, description="Entries by uid")

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, entry: WorldBookEntry) -> str:
        """Add entry and return its key"""
        key = str(entry.uid)
        self.entries[key] = entry
        return key

    def get(self, uid: int) -> Optional[WorldBookEntry]:
        """Get entry by uid"""
        return self.entries.get(str(uid))

    def sorted_entries(self) -> List[WorldBookEntry]:
        """Entries in creation order"""
        return sorted(self.entries.values(), key=lambda e: e.uid)

    def get_by_level(self, level: EntryLevel) -> List[WorldBookEntry]:
        """Entries built from headings of the given level, in creation order"""
        return [e for e in self.sorted_entries() if e.level == level]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping in the downstream key format"""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = 2, ensure_ascii: bool = False) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=ensure_ascii)
