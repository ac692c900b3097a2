"""Export world books to JSON and plain text"""

from .json_export import JsonExporter
from .plain_text import PlainTextExporter

__all__ = ["JsonExporter", "PlainTextExporter"]
