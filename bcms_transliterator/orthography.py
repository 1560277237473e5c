"""
The two orthographies of the BCMS language.
"""

from enum import Enum


class OrthographyError(ValueError):
    """Raised when a selector token names no known orthography."""
    pass


class Orthography(Enum):
    """Writing systems a text can be expressed in."""
    LATIN = "LATIN"
    CYRILLIC = "CYRILLIC"

    @classmethod
    def parse(cls, token: str) -> "Orthography":
        """
        Parse a selector token into an Orthography.

        Matching is exact and case-sensitive: only "LATIN" and "CYRILLIC"
        are accepted.

        Raises:
            OrthographyError: If the token is not one of the two selectors.
        """
        for member in cls:
            if member.value == token:
                return member
        raise OrthographyError(
            f"Must use either LATIN or CYRILLIC as inputs. Got: {token!r}"
        )

    @property
    def complement(self) -> "Orthography":
        """The other orthography."""
        if self is Orthography.LATIN:
            return Orthography.CYRILLIC
        return Orthography.LATIN

    def __str__(self) -> str:
        return self.value
