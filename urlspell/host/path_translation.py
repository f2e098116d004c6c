"""Host-side mapping of request URIs onto the filesystem.

The fixup only sees the result of this mapping: a filename holding the
longest prefix of the URI that exists on disk (plus the first missing
component, if any) and the path info left over after it.

Example:
    >>> from pathlib import Path
    >>> from urlspell.host import translate_request_path
    >>> # /srv/www/doc exists, Foo.html does not
    >>> translate_request_path(Path("/srv/www"), "/doc/Foo.html/more")
    TranslatedPath(filename='/srv/www/doc/Foo.html', path_info='/more', exists=False)
"""

import os
import posixpath
import stat
from typing import NamedTuple


def decode_wsgi_path(value: str) -> str:
    """Reinterpret a WSGI path string as a filesystem-encoded string.

    WSGI servers hand paths over as latin-1 decoded bytes. The bytes are
    decoded again as UTF-8, keeping undecodable bytes as surrogates so they
    still name the right file.
    """
    return value.encode("latin-1").decode("utf-8", "surrogateescape")


class TranslatedPath(NamedTuple):
    """A request URI mapped onto the document root."""
    filename: str
    path_info: str
    exists: bool


def normalize_uri_path(uri: str) -> str:
    """Collapse '.', '..' and repeated slashes in a request path.

    The result never climbs above '/', so it can be joined to a document
    root safely. A trailing slash is preserved.

    Example:
        >>> normalize_uri_path("/doc/../etc//passwd")
        '/etc/passwd'
    """
    if not uri.startswith("/"):
        uri = "/" + uri
    normalized = posixpath.normpath(uri)
    # normpath keeps a leading '//' as POSIX allows
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    if uri.endswith("/") and normalized != "/":
        normalized += "/"
    return normalized


def translate_request_path(document_root: os.PathLike, uri: str) -> TranslatedPath:
    """Map a normalized request URI onto the filesystem.

    Trailing components are stripped until a prefix exists on disk. If that
    prefix is a directory and something was stripped, the first stripped
    component is kept in the filename, which then does not exist. If the
    prefix is a file, everything after it becomes path info.

    Args:
        document_root: Directory the URI space is rooted at.
        uri: Normalized request path, starting with '/'.

    Returns:
        TranslatedPath with the filename, the path info and whether the
        filename exists.
    """
    root = os.path.normpath(os.fspath(document_root))
    if root == "/":
        root = ""
    full = root + uri

    end = len(full)
    last_cut = None
    while end >= len(root):
        prefix = full[:end] or "/"
        try:
            mode = os.stat(prefix).st_mode
        except OSError:
            mode = None

        if mode is not None:
            if stat.S_ISDIR(mode) and last_cut is not None:
                # Search the directory for the component after it
                return TranslatedPath(full[:last_cut], full[last_cut:], False)
            return TranslatedPath(prefix, full[end:], True)

        last_cut = end
        end = full.rfind("/", 0, end)
        if end == -1:
            break

    return TranslatedPath(full, "", False)
