"""Similarity enum for the spelling-correction classifier.

Members are ordered from best to worst match. The ordinal value is used as
the sort key when ranking candidates and by the redirect gate:
1. Identical - Names are byte-for-byte equal
2. Miscapitalized - Names differ only in ASCII letter case
3. Transposition - Two adjacent characters are swapped
4. Missing Character - The request lacks one character of the entry name
5. Extra Character - The request has one character the entry name lacks
6. Simple Typo - One character was mistyped
7. Very Different - Only the part before the first '.' matches
"""

from enum import IntEnum


class Similarity(IntEnum):
    """Ordinal similarity of a directory entry to a mistyped name."""
    IDENTICAL = 0
    MISCAPITALIZED = 1
    TRANSPOSITION = 2
    MISSING_CHARACTER = 3
    EXTRA_CHARACTER = 4
    SIMPLE_TYPO = 5
    VERY_DIFFERENT = 6         # Basename match only

    @property
    def phrase(self) -> str:
        """Human-readable phrase shown next to a candidate in the variant list."""
        return _PHRASES[self]


_PHRASES = {
    Similarity.IDENTICAL: "identical",
    Similarity.MISCAPITALIZED: "miscapitalized",
    Similarity.TRANSPOSITION: "transposed characters",
    Similarity.MISSING_CHARACTER: "character missing",
    Similarity.EXTRA_CHARACTER: "extra character",
    Similarity.SIMPLE_TYPO: "mistyped character",
    Similarity.VERY_DIFFERENT: "common basename",
}
