"""
Line sources: everything that can feed lines into the transliterator.
"""

import os
from typing import Iterator

from .base import SkipHandler, SourceError
from .docx_source import DocxSource
from .pdf_source import PdfSource
from .text_source import TextSource
from .web_source import WebSource


def open_source(
    source: str,
    encoding: str = "utf-8",
    on_skip: SkipHandler = None,
) -> Iterator[str]:
    """
    Route a source string to the reader that handles it.

    URLs are fetched, ``-`` reads stdin, Word and PDF files go through
    their document readers and every other file is read as plain text.

    Raises:
        SourceError: If the source cannot be opened.
    """
    if WebSource.can_handle(source):
        return WebSource.read_lines(source)

    if source == TextSource.STDIN:
        return TextSource.read_lines(source, encoding=encoding, on_skip=on_skip)

    if os.path.isdir(source):
        raise SourceError(f"Is a directory, not a file: {source}")

    if DocxSource.can_handle(source):
        return DocxSource.read_lines(source)

    if PdfSource.can_handle(source):
        return PdfSource.read_lines(source)

    return TextSource.read_lines(source, encoding=encoding, on_skip=on_skip)


__all__ = [
    "DocxSource",
    "PdfSource",
    "SourceError",
    "TextSource",
    "WebSource",
    "open_source",
]
