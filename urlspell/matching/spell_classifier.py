"""Single-edit spelling classifier for directory entry names.

This module implements the two comparisons used when looking for a
correction of a mistyped file name:

    1. classify() - an approximate, case-insensitive string comparison that
       recognises exactly one typing error (transposition, missing character,
       extra character or mistyped character).
    2. basename_match() - a weaker comparison of the part of each name before
       the first '.', used for requests with a wrong or missing extension.

Case folding is ASCII-only: characters outside A-Z are compared by value.

The classifier derives from the Kernighan & Pike ``spdist()`` routine as
adapted in tcsh, with its results ordered after Pollock and Zamora (CACM,
April 1984): omission and transposition are the most common keystroke
errors, followed by insertion and then substitution.

Example:
    >>> from urlspell.matching import classify, basename_match
    >>> classify("indx.html", "index.html")
    <Similarity.MISSING_CHARACTER: 3>
    >>> basename_match("foo.htm", "foo.html")
    True
"""

import string

from urlspell.models import Similarity

# Folds A-Z only; bytes >= 0x80 and other characters compare by raw value
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(value: str) -> str:
    """Lower-case the ASCII letters of ``value``, leaving everything else alone."""
    return value.translate(_ASCII_LOWER)


def equals_ignore_case(left: str, right: str) -> bool:
    """Compare two names ignoring ASCII letter case."""
    return len(left) == len(right) and ascii_lower(left) == ascii_lower(right)


def classify(requested: str, entry: str) -> Similarity:
    """Classify how closely a directory entry matches a mistyped name.

    Both names are scanned together while they agree (ignoring case). The
    remaining suffixes at the first disagreement are then tested for a
    single edit. The tests run in the order transposition, mistyped
    character, extra character, missing character: each one can only
    succeed on inputs that no earlier test claims, so a case is never
    reported as a worse class than it belongs to.

    Args:
        requested: The name from the request, possibly misspelled.
        entry: A directory entry name to compare against.

    Returns:
        MISCAPITALIZED if the names are equal ignoring case (byte-identical
        names included), one of the single-edit classes if exactly one
        typing error separates them, VERY_DIFFERENT otherwise.

    Example:
        >>> classify("abdc", "abcd")
        <Similarity.TRANSPOSITION: 2>
        >>> classify("README", "readme")
        <Similarity.MISCAPITALIZED: 1>
    """
    folded_requested = ascii_lower(requested)
    folded_entry = ascii_lower(entry)

    # Advance past the common prefix
    index = 0
    limit = min(len(folded_requested), len(folded_entry))
    while index < limit and folded_requested[index] == folded_entry[index]:
        index += 1

    if index == len(folded_requested) and index == len(folded_entry):
        return Similarity.MISCAPITALIZED

    rest_requested = folded_requested[index:]
    rest_entry = folded_entry[index:]

    if rest_requested:
        if rest_entry:
            if (
                len(rest_requested) >= 2
                and len(rest_entry) >= 2
                and rest_requested[0] == rest_entry[1]
                and rest_requested[1] == rest_entry[0]
                and rest_requested[2:] == rest_entry[2:]
            ):
                return Similarity.TRANSPOSITION
            if rest_requested[1:] == rest_entry[1:]:
                return Similarity.SIMPLE_TYPO
        if rest_requested[1:] == rest_entry:
            return Similarity.EXTRA_CHARACTER

    if rest_entry and rest_requested == rest_entry[1:]:
        return Similarity.MISSING_CHARACTER

    return Similarity.VERY_DIFFERENT


def _basename_length(name: str) -> int:
    """Offset of the first '.' in ``name``, or its length if there is none."""
    dot = name.find(".")
    return len(name) if dot == -1 else dot


def basename_match(requested: str, entry: str) -> bool:
    """Check whether two names share the same part before the first '.'.

    Covers a wrong or missing extension, e.g. ``Foo`` or ``foo.htm`` when
    ``foo.html`` exists on disk. The comparison ignores ASCII case.

    Args:
        requested: The name from the request.
        entry: A directory entry name.

    Returns:
        True if both basenames have the same length and are equal ignoring
        case, False otherwise.
    """
    length = _basename_length(requested)
    if length != _basename_length(entry):
        return False
    return ascii_lower(requested[:length]) == ascii_lower(entry[:length])
