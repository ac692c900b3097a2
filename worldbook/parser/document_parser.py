"""Region/location notes parser"""

import logging
import re
from pathlib import Path
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field

from worldbook.models import WorldBook
from .entry_builder import create_entry

logger = logging.getLogger(__name__)


FORMAT_GUIDANCE = (
    "Parsing failed. Make sure the text is formatted correctly: separate regions "
    "with `---`, start each region with a `##` title and each location with a `###` title."
)


class ParseError(ValueError):
    """Raised when no entries could be recognized in the input"""

    def __init__(self, message: str = FORMAT_GUIDANCE):
        super().__init__(message)


@dataclass
class ParsedSection:
    """A region or location section of one block"""
    title: Optional[str]  # None when the heading is missing or does not match
    level: int  # 2 for regions, 3 for locations
    content: str
    children: List['ParsedSection'] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


class DocumentParser:
    """Parse region/location notes into world book entries"""

    def __init__(self):
        self.block_separator = re.compile(r'^---[ \t]*$', re.MULTILINE)
        # Zero-width split point before each location heading line
        self.location_boundary = re.compile(r'^(?=###[ \t])', re.MULTILINE)
        # Region name stops at the first whitespace or parenthesis
        self.region_header_pattern = re.compile(r'^##\s+([^(\s]+)')
        self.location_header_pattern = re.compile(r'^###\s+(.+)$')

    def parse_file(self, file_path: Path) -> WorldBook:
        """Parse a notes file into a world book

        Args:
            file_path: Path to a UTF-8 text file

        Returns:
            WorldBook with one entry per recognized heading

        Raises:
            FileNotFoundError: If file doesn't exist
            UnicodeDecodeError: If file is not valid UTF-8
            ParseError: If no entries were recognized
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
        return self.parse_content(content)

    def parse_content(self, content: str) -> WorldBook:
        """Parse notes text into a world book

        Args:
            content: Notes text with ``\\n`` line endings

        Returns:
            WorldBook whose entry uids run 0..n-1 in document order

        Raises:
            ParseError: If no entries were recognized
        """
        book = WorldBook()
        uid = 0

        for region in self.split_blocks(content):
            if not region.title:
                logger.debug(
                    f"Block {region.metadata['block']}: no usable region heading, skipped"
                )
                continue

            book.add(create_entry(uid, region.title, region.content, [region.title], constant=True))
            uid += 1

            for location in region.children:
                if location.title is None:
                    logger.debug(
                        f"Block {location.metadata['block']}: malformed location heading "
                        f"under {region.title!r}, skipped"
                    )
                    continue
                book.add(create_entry(
                    uid,
                    location.title,
                    location.content,
                    [location.title, region.title],
                ))
                uid += 1

        if len(book) == 0:
            raise ParseError()

        logger.info(f"Parsed {len(book)} entries")
        return book

    def split_blocks(self, content: str) -> List[ParsedSection]:
        """Split text into region sections, each holding its location sections

        Blocks that are blank after trimming are dropped. Titles are None
        when a heading cannot be resolved.
        """
        sections = []
        for block_index, block in enumerate(self.block_separator.split(content)):
            block = block.strip()
            if not block:
                continue

            parts = self.location_boundary.split(block)
            region_text = parts[0].strip()
            region = ParsedSection(
                title=self.extract_region_name(region_text),
                level=2,
                content=region_text,
                metadata={"block": block_index},
            )
            for part in parts[1:]:
                location_text = part.strip()
                region.children.append(ParsedSection(
                    title=self.extract_location_name(location_text),
                    level=3,
                    content=location_text,
                    metadata={"block": block_index},
                ))
            sections.append(region)
        return sections

    def extract_region_name(self, section: str) -> Optional[str]:
        """Name from the first ``## `` line of a region section, or None"""
        for line in section.split('\n'):
            if line.startswith('## '):
                match = self.region_header_pattern.match(line)
                return match.group(1).strip() if match else None
        return None

    def extract_location_name(self, section: str) -> Optional[str]:
        """Name from the first line of a location section, or None if it does not match

        A heading of only whitespace after ``###`` matches and yields ''.
        """
        first_line = section.split('\n', 1)[0]
        match = self.location_header_pattern.match(first_line)
        return match.group(1).strip() if match else None


def parse(text: str) -> WorldBook:
    """Parse notes text into a world book, raising ParseError if nothing was found"""
    return DocumentParser().parse_content(text)
