"""
Word document line source.

Yields the text of each paragraph, then the text of each table cell,
one line per text line.
"""

from typing import Iterator

from .base import SourceError, has_extension, require_file


class DocxSource:
    """Reads lines from Word (.docx) documents."""

    SUPPORTED_EXTENSIONS = {".docx"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        return has_extension(file_path, DocxSource.SUPPORTED_EXTENSIONS)

    @staticmethod
    def read_lines(file_path: str) -> Iterator[str]:
        """
        Load a Word document and return an iterator over its text lines.

        Empty paragraphs produce empty lines so the paragraph layout
        survives conversion.

        Raises:
            SourceError: If the file is missing or is not a valid document.
        """
        require_file(file_path)

        try:
            from docx import Document
        except ImportError:
            raise RuntimeError("python-docx is not installed. Run: pip install python-docx")

        try:
            doc = Document(file_path)
        except Exception as e:
            raise SourceError(f"Cannot read Word document {file_path}: {e}") from e

        lines = []
        for para in doc.paragraphs:
            lines.extend(para.text.splitlines() or [""])

        for table in doc.tables:
            for row in table.rows:
                previous = None
                for cell in row.cells:
                    # Merged cells repeat once per grid column they span
                    if cell.text == previous:
                        continue
                    previous = cell.text
                    lines.extend(cell.text.splitlines())

        return iter(lines)
