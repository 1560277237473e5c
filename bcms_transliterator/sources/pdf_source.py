"""
PDF line source.

Extracts the text layer of every page with PyMuPDF. Scanned pages
without a text layer contribute nothing.
"""

from typing import Iterator

from .base import SourceError, has_extension, require_file


class PdfSource:
    """Reads lines from the text layer of PDF files."""

    SUPPORTED_EXTENSIONS = {".pdf"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        return has_extension(file_path, PdfSource.SUPPORTED_EXTENSIONS)

    @staticmethod
    def read_lines(file_path: str) -> Iterator[str]:
        """
        Return an iterator over the text lines of a PDF, page by page.

        Raises:
            SourceError: If the file is missing or cannot be opened as a PDF.
        """
        require_file(file_path)

        try:
            import fitz  # pymupdf
        except ImportError:
            raise RuntimeError("pymupdf is not installed. Run: pip install pymupdf")

        try:
            doc = fitz.open(file_path)
        except Exception as e:
            raise SourceError(f"Cannot open PDF {file_path}: {e}") from e

        lines = []
        try:
            for page in doc:
                lines.extend(page.get_text("text").splitlines())
        finally:
            doc.close()

        return iter(lines)
