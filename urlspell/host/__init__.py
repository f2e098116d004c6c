"""Host integration package for urlspell.

The spelling fixup only depends on narrow host interfaces. This package
provides a host for WSGI servers:
- translate_request_path(): Maps a URI onto the document root
- SpellingMiddleware: Runs the fixup in front of a WSGI application
- StaticFileApp: Serves files from the document root
"""

from .path_translation import (
    TranslatedPath,
    decode_wsgi_path,
    normalize_uri_path,
    translate_request_path,
)
from .static_app import StaticFileApp
from .wsgi_middleware import SpellingMiddleware

__all__ = [
    "TranslatedPath",
    "decode_wsgi_path",
    "normalize_uri_path",
    "translate_request_path",
    "StaticFileApp",
    "SpellingMiddleware",
]
