"""
Shared pieces of the line sources.
"""

import os
from typing import Callable, Optional


class SourceError(Exception):
    """Raised when an input source cannot be opened or read."""
    pass


# Called with (source, line number, error) for every line that is skipped.
SkipHandler = Optional[Callable[[str, int, Exception], None]]


def require_file(path: str) -> None:
    """Raise SourceError unless ``path`` is an existing regular file."""
    if os.path.isdir(path):
        raise SourceError(f"Is a directory, not a file: {path}")
    if not os.path.isfile(path):
        raise SourceError(f"File not found: {path}")


def has_extension(path: str, extensions: set) -> bool:
    _, ext = os.path.splitext(path.lower())
    return ext in extensions
