"""World book entry models"""

from enum import Enum
from typing import List, Optional, Dict, Any, Literal
from pydantic import BaseModel, Field, computed_field


class EntryLevel(str, Enum):
    """Level of the heading an entry was built from"""
    REGION = "region"
    LOCATION = "location"


# Numeric insertion codes used by the extensions mirror
POSITION_CODES: Dict[str, int] = {
    "before_char": 0,
    "after_char": 1,
}


class EntryExtensions(BaseModel):
    """snake_case mirror of an entry's activation settings.

    Downstream readers look for these under ``extensions``. The mirror is
    always rebuilt from its entry with :meth:`from_entry`, never edited on
    its own.
    """
    position: int
    exclude_recursion: bool
    display_index: int
    probability: int
    useProbability: bool
    depth: int
    selectiveLogic: int
    group: str
    group_override: bool
    group_weight: int
    prevent_recursion: bool
    delay_until_recursion: bool
    scan_depth: Optional[int]
    match_whole_words: Optional[bool]
    use_group_scoring: Optional[bool]
    case_sensitive: Optional[bool]
    automation_id: str
    role: Optional[int]
    vectorized: bool
    sticky: int
    cooldown: int
    delay: int

    @classmethod
    def from_entry(cls, entry: "WorldBookEntry") -> "EntryExtensions":
        """Build the mirror from an entry's primary fields"""
        return cls(
            position=POSITION_CODES[entry.position],
            exclude_recursion=entry.exclude_recursion,
            display_index=entry.display_index,
            probability=entry.probability,
            useProbability=entry.use_probability,
            depth=entry.depth,
            selectiveLogic=entry.selective_logic,
            group=entry.group,
            group_override=entry.group_override,
            group_weight=entry.group_weight,
            prevent_recursion=entry.prevent_recursion,
            delay_until_recursion=entry.delay_until_recursion,
            scan_depth=entry.scan_depth,
            match_whole_words=entry.match_whole_words,
            use_group_scoring=entry.use_group_scoring,
            case_sensitive=entry.case_sensitive,
            automation_id=entry.automation_id,
            role=entry.role,
            vectorized=entry.vectorized,
            sticky=entry.sticky,
            cooldown=entry.cooldown,
            delay=entry.delay,
        )


class WorldBookEntry(BaseModel):
    """A single world book record built from a region or location heading"""
    uid: int = Field(..., ge=0, description="Unique id assigned in parse order")
    key: List[str] = Field(..., description="Primary keywords that activate the entry")
    comment: str = Field(..., description="Display label (heading text)")
    content: str = Field(..., description="Raw text block, heading line included")
    constant: bool = Field(default=False, description="Always active (regions only)")
    order: int = Field(..., description="Insertion order")
    display_index: int = Field(..., alias="displayIndex", description="Display order")

    keysecondary: List[str] = Field(default_factory=list)
    vectorized: bool = False
    selective: bool = False
    selective_logic: int = Field(default=0, alias="selectiveLogic")
    add_memo: bool = Field(default=True, alias="addMemo")
    position: Literal["before_char", "after_char"] = "before_char"
    disable: bool = False
    exclude_recursion: bool = Field(default=False, alias="excludeRecursion")
    prevent_recursion: bool = Field(default=False, alias="preventRecursion")
    delay_until_recursion: bool = Field(default=False, alias="delayUntilRecursion")
    probability: int = Field(default=100, ge=0, le=100)
    use_probability: bool = Field(default=True, alias="useProbability")
    depth: int = 4
    group: str = ""
    group_override: bool = Field(default=False, alias="groupOverride")
    group_weight: int = Field(default=100, alias="groupWeight")
    scan_depth: Optional[int] = Field(default=None, alias="scanDepth")
    case_sensitive: Optional[bool] = Field(default=False, alias="caseSensitive")
    match_whole_words: Optional[bool] = Field(default=None, alias="matchWholeWords")
    use_group_scoring: Optional[bool] = Field(default=None, alias="useGroupScoring")
    automation_id: str = Field(default="", alias="automationId")
    role: Optional[int] = None
    sticky: int = 0
    cooldown: int = 0
    delay: int = 0

    class Config:
        populate_by_name = True

    @computed_field
    @property
    def extensions(self) -> EntryExtensions:
        return EntryExtensions.from_entry(self)

    @property
    def level(self) -> EntryLevel:
        return EntryLevel.REGION if self.constant else EntryLevel.LOCATION


def _collect_defaults() -> Dict[str, Any]:
    """Default values for every field the parser does not derive from text"""
    defaults = {}
    for name, field_info in WorldBookEntry.model_fields.items():
        if field_info.is_required() or name == "constant":
            continue
        defaults[name] = field_info.get_default(call_default_factory=True)
    return defaults


# Shared by every entry regardless of level
DEFAULT_ENTRY_SETTINGS: Dict[str, Any] = _collect_defaults()
