"""Directory scanning for spelling-correction candidates.

This module provides the DirectoryScanner class, which enumerates the
entries of the directory a request resolved into and grades each one against
the requested (missing) name.

Example:
    >>> from urlspell.scanning import DirectoryScanner
    >>> scanner = DirectoryScanner()
    >>> result = scanner.scan("/srv/www/doc", "indx.html")
    >>> for candidate in result.candidates:
    ...     print(f"{candidate.name}: {candidate.similarity.phrase}")
"""

import logging
import os
from typing import Callable, ContextManager, Iterator, Optional

from urlspell.matching import basename_match, classify, equals_ignore_case
from urlspell.models import Candidate, ScanResult, Similarity

# Configure module logger
logger = logging.getLogger('urlspell.scanning')


class DirectoryScanner:
    """Collects correction candidates for a name from its parent directory.

    The scanner holds no per-request state, so one instance may serve any
    number of concurrent requests.

    Attributes:
        basename_matching: Whether entries sharing only the part before the
            first '.' are collected as VERY_DIFFERENT candidates.
        directory_opener: Callable opening a directory for enumeration, in
            the manner of os.scandir().

    Example:
        >>> scanner = DirectoryScanner()
        >>> result = scanner.scan("/srv/www/doc", "Foo.html")
        >>> result.exact_sibling
        False
    """

    def __init__(
        self,
        basename_matching: bool = True,
        directory_opener: Optional[Callable[[str], ContextManager[Iterator[os.DirEntry]]]] = None,
    ) -> None:
        """Initialize the DirectoryScanner.

        Args:
            basename_matching: Collect entries whose name matches only up to
                the first '.'. Defaults to True.
            directory_opener: Replacement for os.scandir(). It must return a
                context manager that iterates over objects with a ``name``
                attribute and closes the directory on exit.
        """
        self.basename_matching = basename_matching
        self.directory_opener = directory_opener if directory_opener is not None else os.scandir

    def scan(self, directory: str, requested: str) -> Optional[ScanResult]:
        """Scan a directory for entries resembling the requested name.

        Entries are graded in the order the operating system enumerates them
        and candidates keep that order. An entry equal byte-for-byte to the
        requested name stops the scan: it exists on disk but did not resolve
        (a broken symlink, a permission problem or a race), and redirecting
        to it would loop.

        Args:
            directory: Path of the parent directory.
            requested: The name that did not resolve.

        Returns:
            ScanResult with the candidates in enumeration order, or with
            ``exact_sibling`` set if the requested name itself was found.
            None if the directory cannot be opened.

        Example:
            >>> result = scanner.scan("/srv/www/doc", "abcd")
            >>> [c.name for c in result.candidates]
            ['abdc', 'acbd']
        """
        try:
            handle = self.directory_opener(directory)
        except OSError as e:
            logger.debug(f"Cannot open directory {directory!r}: {e}")
            return None

        result = ScanResult()

        with handle as entries:
            iterator = iter(entries)
            while True:
                # A failing read ends the enumeration like running out of entries
                try:
                    entry = next(iterator)
                except StopIteration:
                    break
                except OSError as e:
                    logger.debug(f"Error reading directory {directory!r}: {e}")
                    break

                name = entry.name

                if name == requested:
                    result.exact_sibling = True
                    result.candidates.clear()
                    return result

                similarity = self.grade(requested, name)
                if similarity is not None:
                    result.candidates.append(Candidate(name=name, similarity=similarity))

        return result

    def grade(self, requested: str, name: str) -> Optional[Similarity]:
        """Grade a single entry name against the requested name.

        Args:
            requested: The name that did not resolve.
            name: A directory entry name, not byte-equal to ``requested``.

        Returns:
            The Similarity to record, or None if the entry is discarded.
        """
        if name in (".", ".."):
            return None

        # Miscapitalization is checked first
        if equals_ignore_case(requested, name):
            return Similarity.MISCAPITALIZED

        similarity = classify(requested, name)
        if similarity is not Similarity.VERY_DIFFERENT:
            return similarity

        if self.basename_matching and basename_match(requested, name):
            return Similarity.VERY_DIFFERENT

        return None
