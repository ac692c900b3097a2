"""Build world book entries from parsed headings"""

import copy
from typing import List

from worldbook.models import WorldBookEntry, DEFAULT_ENTRY_SETTINGS


def create_entry(uid: int, comment: str, content: str, keys: List[str], constant: bool = False) -> WorldBookEntry:
    """Create an entry with the shared default settings

    Args:
        uid: Entry id, also used for ``order`` and ``displayIndex``
        comment: Display label (heading text)
        content: Full text block including the heading line
        keys: Activation keywords
        constant: True for region entries

    Returns:
        A new WorldBookEntry
    """
    settings = copy.deepcopy(DEFAULT_ENTRY_SETTINGS)
    settings.update(
        uid=uid,
        key=list(keys),
        comment=comment,
        content=content,
        constant=constant,
        order=uid,
        display_index=uid,
    )
    return WorldBookEntry(**settings)
