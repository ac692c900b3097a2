"""JSON export functionality"""

from pathlib import Path
from typing import Optional

from worldbook.models import WorldBook


class JsonExporter:
    """Exports world books in the downstream JSON format"""

    def __init__(self, indent: Optional[int] = 2, ensure_ascii: bool = False):
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, book: WorldBook) -> str:
        """
        Export world book to JSON

        Args:
            book: World book to export

        Returns:
            JSON string of the form ``{"entries": {"<uid>": {...}}}``
        """
        return book.to_json(indent=self.indent, ensure_ascii=self.ensure_ascii)

    def export_to_file(self, book: WorldBook, output_path: Path) -> Path:
        """Write the JSON export to disk, creating parent directories"""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.export(book), encoding="utf-8")
        return output_path
