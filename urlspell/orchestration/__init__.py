"""Fixup orchestration package for urlspell.

- SpellingFixup: Fixup-phase entry point tying the scanner, the decision
  policy and the renderer together.
"""

from urlspell.orchestration.spelling_fixup import SpellingFixup

__all__ = ["SpellingFixup"]
