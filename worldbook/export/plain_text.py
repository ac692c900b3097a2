"""Plain-text preview export"""

from pathlib import Path

from worldbook.models import WorldBook


class PlainTextExporter:
    """Flattens a world book into ``[label]`` headed text blocks"""

    def export(self, book: WorldBook) -> str:
        blocks = [f"[{entry.comment}]\n{entry.content}" for entry in book.sorted_entries()]
        return "\n\n".join(blocks)

    def export_to_file(self, book: WorldBook, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.export(book), encoding="utf-8")
        return output_path
