"""WSGI integration of the spelling fixup.

SpellingMiddleware runs the fixup in front of any WSGI application that
serves files from a document root. Requests the fixup declines, or handles
without correcting, are passed to the wrapped application unchanged.

Example:
    from urlspell.host import SpellingMiddleware, StaticFileApp
    from urlspell.models import ServerConfig

    config = ServerConfig(check_spelling=True, document_root=Path("/srv/www"))
    app = SpellingMiddleware(StaticFileApp(config.document_root), config)
"""

import logging
from html import escape
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from urlspell.correction import VARIANT_LIST_NOTE
from urlspell.models import FixupStatus, RequestContext, ServerConfig
from urlspell.orchestration import SpellingFixup

from .path_translation import decode_wsgi_path, normalize_uri_path, translate_request_path

logger = logging.getLogger('urlspell.host')

StartResponse = Callable[..., Callable[[bytes], object]]

# Environ key a host sets on internally generated requests
SUBREQUEST_ENVIRON_KEY = "urlspell.subrequest"

_STATUS_LINES = {
    301: "301 Moved Permanently",
    300: "300 Multiple Choices",
}


def headers_in(environ: Dict[str, object]) -> Dict[str, str]:
    """Collect inbound request headers from a WSGI environ."""
    headers: Dict[str, str] = {}
    for key, value in environ.items():
        if key.startswith("HTTP_"):
            name = key[5:].replace("_", "-").title()
            headers[name] = str(value)
    return headers


class SpellingMiddleware:
    """WSGI middleware answering misspelled URLs with 301 or 300.

    Attributes:
        app: The wrapped WSGI application.
        config: Server configuration; must name a document root.
    """

    def __init__(
        self,
        app: Callable,
        config: ServerConfig,
        fixup: Optional[SpellingFixup] = None,
    ) -> None:
        """Initialize the SpellingMiddleware.

        Args:
            app: WSGI application serving the document root.
            config: Server configuration.
            fixup: SpellingFixup to use. Built from ``config`` if omitted.

        Raises:
            ValueError: If ``config`` has no document root.
        """
        if config.document_root is None:
            raise ValueError("SpellingMiddleware requires a document root")
        self.app = app
        self.config = config
        self._fixup = fixup if fixup is not None else SpellingFixup(config)

    def build_request(self, environ: Dict[str, object]) -> RequestContext:
        """Translate a WSGI environ into the request state the fixup reads."""
        # SCRIPT_NAME is where the app is mounted; only PATH_INFO maps onto the root
        script_name = decode_wsgi_path(str(environ.get("SCRIPT_NAME", ""))).rstrip("/")
        local_path = normalize_uri_path(decode_wsgi_path(str(environ.get("PATH_INFO", ""))))
        method = str(environ.get("REQUEST_METHOD", "GET"))
        # HEAD is a GET without a body as far as the fixup is concerned
        if method == "HEAD":
            method = "GET"
        translated = translate_request_path(self.config.document_root, local_path)
        return RequestContext(
            uri=script_name + local_path,
            filename=translated.filename,
            path_info=translated.path_info,
            method=method,
            file_exists=translated.exists,
            is_subrequest=bool(environ.get(SUBREQUEST_ENVIRON_KEY)),
            is_proxy_request=False,
            headers_in=headers_in(environ),
        )

    def __call__(self, environ: Dict[str, object], start_response: StartResponse) -> Iterable[bytes]:
        request = self.build_request(environ)
        result = self._fixup.check_spelling(request)

        if result.status is FixupStatus.MOVED_PERMANENTLY:
            body = render_moved_body(request.headers_out["Location"])
            headers = [("Location", request.headers_out["Location"])]
            return self._respond(start_response, 301, body, headers, environ)

        if result.status is FixupStatus.MULTIPLE_CHOICES:
            body = render_multiple_choices_body(request.notes[VARIANT_LIST_NOTE])
            return self._respond(start_response, 300, body, [], environ)

        logger.debug(f"Passing {request.uri} through ({result.status.value})")
        return self.app(environ, start_response)

    def _respond(
        self,
        start_response: StartResponse,
        status: int,
        body: str,
        extra_headers: List[Tuple[str, str]],
        environ: Dict[str, object],
    ) -> Iterable[bytes]:
        """Send a complete HTML response generated by the fixup."""
        payload = body.encode("utf-8", "surrogateescape")
        headers = extra_headers + [
            ("Content-Type", "text/html; charset=utf-8"),
            ("Content-Length", str(len(payload))),
        ]
        start_response(_STATUS_LINES[status], headers)
        if environ.get("REQUEST_METHOD") == "HEAD":
            return [b""]
        return [payload]


def render_moved_body(location: str) -> str:
    """HTML body of a 301 response."""
    return (
        "<!DOCTYPE HTML PUBLIC \"-//IETF//DTD HTML 2.0//EN\">\n"
        "<HTML><HEAD>\n<TITLE>301 Moved Permanently</TITLE>\n</HEAD><BODY>\n"
        "<H1>Moved Permanently</H1>\n"
        f"The document has moved <A HREF=\"{escape(location)}\">here</A>.<P>\n"
        "</BODY></HTML>\n"
    )


def render_multiple_choices_body(variant_list: str) -> str:
    """HTML body of a 300 response wrapping the variant list."""
    return (
        "<!DOCTYPE HTML PUBLIC \"-//IETF//DTD HTML 2.0//EN\">\n"
        "<HTML><HEAD>\n<TITLE>300 Multiple Choices</TITLE>\n</HEAD><BODY>\n"
        "<H1>Multiple Choices</H1>\n"
        f"{variant_list}"
        "</BODY></HTML>\n"
    )
