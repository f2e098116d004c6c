"""Minimal static file WSGI application.

Serves regular files below a document root for GET and HEAD requests, and
``index.html`` for directories. Everything else is answered with a plain
error page. It is the origin server that ``urlspell serve`` puts behind
SpellingMiddleware.
"""

import logging
import mimetypes
import os
from pathlib import Path
from typing import Callable, Dict, Iterable

from .path_translation import decode_wsgi_path, normalize_uri_path

logger = logging.getLogger('urlspell.host')

_ERROR_TITLES = {
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
}


class StaticFileApp:
    """Serve files from a document root.

    Attributes:
        document_root: Resolved directory files are served from.
        index_name: File served when a directory is requested.
    """

    def __init__(self, document_root: Path, index_name: str = "index.html") -> None:
        self.document_root = Path(document_root).resolve()
        self.index_name = index_name

    def __call__(self, environ: Dict[str, object], start_response: Callable) -> Iterable[bytes]:
        method = environ.get("REQUEST_METHOD", "GET")
        if method not in ("GET", "HEAD"):
            return self._error(start_response, 405, [("Allow", "GET, HEAD")])

        uri = normalize_uri_path(decode_wsgi_path(str(environ.get("PATH_INFO", ""))))
        path = self.document_root / uri.lstrip("/")

        if path.is_dir():
            path = path / self.index_name

        if not path.is_file():
            return self._error(start_response, 404)

        try:
            payload = path.read_bytes()
        except PermissionError:
            return self._error(start_response, 403)
        except OSError as e:
            logger.warning(f"Error reading {path}: {e}")
            return self._error(start_response, 404)

        content_type, _ = mimetypes.guess_type(os.fspath(path))
        start_response("200 OK", [
            ("Content-Type", content_type or "application/octet-stream"),
            ("Content-Length", str(len(payload))),
        ])
        if method == "HEAD":
            return [b""]
        return [payload]

    def _error(self, start_response: Callable, status: int, headers=None) -> Iterable[bytes]:
        """Send a short HTML error page."""
        title = _ERROR_TITLES[status]
        body = (
            f"<HTML><HEAD><TITLE>{status} {title}</TITLE></HEAD>"
            f"<BODY><H1>{title}</H1></BODY></HTML>\n"
        ).encode("ascii")
        start_response(f"{status} {title}", (headers or []) + [
            ("Content-Type", "text/html"),
            ("Content-Length", str(len(body))),
        ])
        return [body]
