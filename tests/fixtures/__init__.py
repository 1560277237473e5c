# Test fixtures
from .sample_texts import (
    SAMPLE_LATIN_LINES,
    SAMPLE_CYRILLIC_LINES,
    SAMPLE_LATIN_TEXT,
    SAMPLE_CYRILLIC_TEXT,
    SAMPLE_HTML,
    DIGRAPH_WORDS,
)

__all__ = [
    "SAMPLE_LATIN_LINES",
    "SAMPLE_CYRILLIC_LINES",
    "SAMPLE_LATIN_TEXT",
    "SAMPLE_CYRILLIC_TEXT",
    "SAMPLE_HTML",
    "DIGRAPH_WORDS",
]
