"""
BCMS Transliterator - Latin/Cyrillic Alphabet Converter

Converts Bosnian/Croatian/Montenegrin/Serbian text between its Latin
and Cyrillic orthographies, line by line, using a fixed ordered
substitution table. Digraphs (dž, lj, nj) are substituted before the
single letters they start with.
"""

from .orthography import Orthography, OrthographyError
from .sources import SourceError
from .core import Text, Transliterator, convert, map_replace

__version__ = "0.1.0"

__all__ = [
    "Orthography",
    "OrthographyError",
    "SourceError",
    "Text",
    "Transliterator",
    "convert",
    "map_replace",
]
