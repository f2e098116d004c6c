"""Name matching package for urlspell.

This package contains the classifier that grades a directory entry against
a mistyped file name, and the weaker basename comparison used for wrong or
missing extensions.

Example:
    >>> from urlspell.matching import classify
    >>> classify("Foo.html", "foo.html")
    <Similarity.MISCAPITALIZED: 1>
"""

from .spell_classifier import ascii_lower, basename_match, classify, equals_ignore_case

__all__ = [
    "ascii_lower",
    "basename_match",
    "classify",
    "equals_ignore_case",
]
