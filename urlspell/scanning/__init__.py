"""Directory scanning package for urlspell.

This package provides the DirectoryScanner, which enumerates the entries of
a parent directory and collects those that look like a misspelling of the
requested name.

Example:
    >>> from urlspell.scanning import DirectoryScanner
    >>> result = DirectoryScanner().scan("/srv/www/doc", "indx.html")
"""

from .directory_scanner import DirectoryScanner

__all__ = ["DirectoryScanner"]
