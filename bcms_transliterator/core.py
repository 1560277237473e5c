"""
Transliterator Core Engine

Converts text between BCMS Latin and Cyrillic by applying an ordered
substitution table to whole lines, and routes input sources (files,
stdin, documents, URLs) to the matching line reader.

Substitution is literal: no word boundaries, no context. Characters
outside the table pass through untouched.
"""

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .orthography import Orthography
from .table import FLIPPED_REPLACEMENTS, REPLACEMENTS, SubstitutionTable
from .sources import DocxSource, PdfSource, TextSource, WebSource, open_source


@dataclass(frozen=True)
class Text:
    """A string together with the orthography it is written in."""
    orthography: Orthography
    contents: str


def map_replace(table: SubstitutionTable, contents: str) -> str:
    """
    Apply every pair of ``table`` to ``contents``, in order.

    Each pair replaces all non-overlapping occurrences in the output of
    the previous pair, not in the original string.
    """
    out = contents
    for src, dst in table:
        out = out.replace(src, dst)
    return out


def table_for(source: Orthography, target: Orthography) -> SubstitutionTable:
    """Return the table converting ``source`` into ``target``."""
    if source == target:
        return ()
    if source is Orthography.LATIN:
        return REPLACEMENTS
    return FLIPPED_REPLACEMENTS


def convert(target: Orthography, text: Text) -> Text:
    """
    Re-express ``text`` in the ``target`` orthography.

    Text already in ``target`` is returned as is.
    """
    if text.orthography == target:
        return text
    table = table_for(text.orthography, target)
    return Text(orthography=target, contents=map_replace(table, text.contents))


class Transliterator:
    """
    Line-oriented transliteration engine.

    Holds the source orthography of the input and the orthography to
    produce; by default the target is the other alphabet.
    """

    def __init__(
        self,
        source: Orthography,
        target: Optional[Orthography] = None,
        encoding: str = "utf-8",
        verbose: bool = False,
    ):
        self.source = source
        self.target = target or source.complement
        self.encoding = encoding
        self.verbose = verbose

    def convert_text(self, contents: str) -> str:
        """Convert a single line of text."""
        return convert(self.target, Text(self.source, contents)).contents

    def convert_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Convert lines one at a time, keeping their order."""
        for line in lines:
            yield self.convert_text(line)

    def convert_source(self, source: str) -> Iterator[str]:
        """
        Read lines from a file path, ``-`` (stdin) or URL and convert them.

        Raises:
            SourceError: If the source cannot be opened or read.
        """
        source = source.strip()
        self._status(f"[{_source_tag(source)}] Reading: {source}")
        lines = open_source(source, encoding=self.encoding, on_skip=self._skipped)
        return self.convert_lines(lines)

    def _skipped(self, source: str, lineno: int, error: Exception) -> None:
        self._status(f"[SKIP] {source}:{lineno}: {error}")

    def _status(self, message: str) -> None:
        if self.verbose:
            print(message, file=sys.stderr)

    @staticmethod
    def supported_sources() -> dict:
        """Return a dictionary of all supported input sources."""
        return {
            "Plain Text": ["any other file", "- (stdin)"],
            "Word Documents": sorted(DocxSource.SUPPORTED_EXTENSIONS),
            "PDF": sorted(PdfSource.SUPPORTED_EXTENSIONS),
            "Web Pages": ["http://", "https://"],
        }


def _source_tag(source: str) -> str:
    if WebSource.can_handle(source):
        return "URL"
    if source == TextSource.STDIN:
        return "STDIN"
    if DocxSource.can_handle(source):
        return "DOCX"
    if PdfSource.can_handle(source):
        return "PDF"
    return "TXT"
