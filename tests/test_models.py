"""Tests for Pydantic models"""

import json

import pytest
from pydantic import ValidationError

from worldbook.models import (
    WorldBook,
    WorldBookEntry,
    EntryExtensions,
    EntryLevel,
    DEFAULT_ENTRY_SETTINGS,
    POSITION_CODES,
)
from worldbook.parser import create_entry


MIRRORED_FIELDS = {
    "exclude_recursion": "excludeRecursion",
    "display_index": "displayIndex",
    "probability": "probability",
    "useProbability": "useProbability",
    "depth": "depth",
    "selectiveLogic": "selectiveLogic",
    "group": "group",
    "group_override": "groupOverride",
    "group_weight": "groupWeight",
    "prevent_recursion": "preventRecursion",
    "delay_until_recursion": "delayUntilRecursion",
    "scan_depth": "scanDepth",
    "match_whole_words": "matchWholeWords",
    "use_group_scoring": "useGroupScoring",
    "case_sensitive": "caseSensitive",
    "automation_id": "automationId",
    "role": "role",
    "vectorized": "vectorized",
    "sticky": "sticky",
    "cooldown": "cooldown",
    "delay": "delay",
}


def test_default_settings():
    """Test the shared defaults template"""
    assert DEFAULT_ENTRY_SETTINGS["probability"] == 100
    assert DEFAULT_ENTRY_SETTINGS["use_probability"] is True
    assert DEFAULT_ENTRY_SETTINGS["depth"] == 4
    assert DEFAULT_ENTRY_SETTINGS["keysecondary"] == []
    assert DEFAULT_ENTRY_SETTINGS["group"] == ""
    assert DEFAULT_ENTRY_SETTINGS["prevent_recursion"] is False
    assert DEFAULT_ENTRY_SETTINGS["disable"] is False
    assert DEFAULT_ENTRY_SETTINGS["selective"] is False
    assert DEFAULT_ENTRY_SETTINGS["case_sensitive"] is False
    assert DEFAULT_ENTRY_SETTINGS["automation_id"] == ""
    assert DEFAULT_ENTRY_SETTINGS["role"] is None
    assert DEFAULT_ENTRY_SETTINGS["sticky"] == 0
    assert DEFAULT_ENTRY_SETTINGS["cooldown"] == 0
    assert DEFAULT_ENTRY_SETTINGS["delay"] == 0
    # Derived per entry, never part of the template
    for name in ("uid", "key", "comment", "content", "constant", "order", "display_index"):
        assert name not in DEFAULT_ENTRY_SETTINGS


def test_create_entry():
    """Test entry construction from parsed values"""
    entry = create_entry(3, "Beijing", "### Beijing\n*desc", ["Beijing", "China"])

    assert entry.uid == 3
    assert entry.order == 3
    assert entry.display_index == 3
    assert entry.comment == "Beijing"
    assert entry.key == ["Beijing", "China"]
    assert entry.constant is False
    assert entry.level == EntryLevel.LOCATION
    assert entry.position == "before_char"
    assert entry.add_memo is True


def test_create_region_entry():
    """Test region entries are always active"""
    entry = create_entry(0, "China", "## China", ["China"], constant=True)

    assert entry.constant is True
    assert entry.level == EntryLevel.REGION


def test_entries_do_not_share_lists():
    """Test default lists are independent between entries"""
    first = create_entry(0, "A", "## A", ["A"], constant=True)
    second = create_entry(1, "B", "## B", ["B"], constant=True)

    first.keysecondary.append("extra")

    assert second.keysecondary == []
    assert DEFAULT_ENTRY_SETTINGS["keysecondary"] == []


def test_negative_uid_rejected():
    """Test uids must be non-negative"""
    with pytest.raises(ValidationError):
        create_entry(-1, "A", "## A", ["A"])


def test_unknown_position_rejected():
    """Test only known insertion positions are accepted"""
    settings = create_entry(0, "A", "## A", ["A"]).model_dump(by_alias=True)
    settings["position"] = "middle"

    with pytest.raises(ValidationError):
        WorldBookEntry.model_validate(settings)


def test_extensions_mirror_entry():
    """Test every mirrored field carries the primary value"""
    entry = create_entry(5, "China", "## China", ["China"], constant=True)
    data = entry.model_dump(mode="json", by_alias=True)
    extensions = data["extensions"]

    for mirror_name, primary_name in MIRRORED_FIELDS.items():
        assert extensions[mirror_name] == data[primary_name], mirror_name
    assert extensions["position"] == POSITION_CODES[entry.position]


def test_extensions_follow_overrides():
    """Test the mirror is rebuilt from the entry rather than stored"""
    entry = create_entry(0, "A", "## A", ["A"])
    entry.depth = 7
    entry.position = "after_char"

    assert entry.extensions.depth == 7
    assert entry.extensions.position == 1
    assert EntryExtensions.from_entry(entry) == entry.extensions


def test_entry_serializes_downstream_keys():
    """Test serialized entries use the downstream key names"""
    entry = create_entry(0, "China", "## China", ["China"], constant=True)
    data = entry.model_dump(mode="json", by_alias=True)

    for key in (
        "uid", "key", "keysecondary", "comment", "content", "constant",
        "vectorized", "selective", "selectiveLogic", "addMemo", "order",
        "position", "disable", "excludeRecursion", "preventRecursion",
        "delayUntilRecursion", "probability", "useProbability", "depth",
        "group", "groupOverride", "groupWeight", "scanDepth", "caseSensitive",
        "matchWholeWords", "useGroupScoring", "automationId", "role",
        "sticky", "cooldown", "delay", "displayIndex", "extensions",
    ):
        assert key in data, key


def test_entry_round_trips_through_aliases():
    """Test an exported entry validates back into the same entry"""
    entry = create_entry(2, "Paris", "### Paris", ["Paris", "France"])
    data = entry.model_dump(mode="json", by_alias=True)

    assert WorldBookEntry.model_validate(data) == entry


class TestWorldBook:
    """Test the WorldBook container"""

    @pytest.fixture
    def book(self):
        """Create a world book with one region and two locations"""
        book = WorldBook()
        book.add(create_entry(0, "China", "## China", ["China"], constant=True))
        book.add(create_entry(2, "Shanghai", "### Shanghai", ["Shanghai", "China"]))
        book.add(create_entry(1, "Beijing", "### Beijing", ["Beijing", "China"]))
        return book

    def test_add_uses_stringified_uid(self, book):
        """Test entries are keyed by their uid as a string"""
        assert set(book.entries) == {"0", "1", "2"}
        assert len(book) == 3

    def test_get(self, book):
        """Test lookup by uid"""
        assert book.get(1).comment == "Beijing"
        assert book.get(9) is None

    def test_sorted_entries(self, book):
        """Test entries sort by uid regardless of insertion order"""
        assert [e.comment for e in book.sorted_entries()] == ["China", "Beijing", "Shanghai"]

    def test_get_by_level(self, book):
        """Test filtering by heading level"""
        assert [e.comment for e in book.get_by_level(EntryLevel.REGION)] == ["China"]
        assert [e.comment for e in book.get_by_level(EntryLevel.LOCATION)] == ["Beijing", "Shanghai"]

    def test_to_json(self, book):
        """Test JSON shape and non-ASCII handling"""
        book.add(create_entry(3, "北京", "### 北京", ["北京", "China"]))
        text = book.to_json()
        data = json.loads(text)

        assert list(data) == ["entries"]
        assert data["entries"]["0"]["constant"] is True
        assert data["entries"]["0"]["extensions"]["depth"] == data["entries"]["0"]["depth"]
        assert data["entries"]["1"]["extensions"]["display_index"] == 1
        assert "北京" in text
        assert "\\u" not in text
