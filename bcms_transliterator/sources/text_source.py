"""
Plain text line source.

Reads a file (or stdin) as bytes and decodes one line at a time, so a
line that does not decode is skipped without losing the rest of the
stream.
"""

import sys
from typing import BinaryIO, Iterator

from .base import SkipHandler, SourceError, require_file


class TextSource:
    """Reads lines from plain text files and standard input."""

    STDIN = "-"

    @staticmethod
    def can_handle(source: str) -> bool:
        # Fallback for anything no other source claims
        return True

    @staticmethod
    def read_lines(
        source: str,
        encoding: str = "utf-8",
        on_skip: SkipHandler = None,
    ) -> Iterator[str]:
        """
        Open ``source`` and return an iterator over its decoded lines.

        Line terminators are removed. The file is opened right away, so a
        missing or unreadable file fails here rather than on first read.

        Raises:
            SourceError: If the file cannot be opened.
        """
        if source == TextSource.STDIN:
            return _decode_lines(sys.stdin.buffer, "<stdin>", encoding, on_skip, close=False)

        require_file(source)
        try:
            stream = open(source, "rb")
        except OSError as e:
            raise SourceError(f"Cannot open {source}: {e.strerror or e}") from e
        return _decode_lines(stream, source, encoding, on_skip, close=True)


def _decode_lines(
    stream: BinaryIO,
    name: str,
    encoding: str,
    on_skip: SkipHandler,
    close: bool,
) -> Iterator[str]:
    try:
        for lineno, raw in enumerate(stream, start=1):
            try:
                line = raw.decode(encoding)
            except UnicodeDecodeError as e:
                if on_skip is not None:
                    on_skip(name, lineno, e)
                continue
            yield _strip_terminator(line)
    except OSError as e:
        raise SourceError(f"Failed reading {name}: {e}") from e
    finally:
        if close:
            stream.close()


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
