"""Document parsing and entry construction"""

from .document_parser import DocumentParser, ParsedSection, ParseError, FORMAT_GUIDANCE, parse
from .entry_builder import create_entry

__all__ = [
    "DocumentParser",
    "ParsedSection",
    "ParseError",
    "FORMAT_GUIDANCE",
    "parse",
    "create_entry",
]
