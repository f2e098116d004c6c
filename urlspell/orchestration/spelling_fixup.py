"""SpellingFixup, the fixup-phase entry point for URL spelling correction.

The host calls ``check_spelling()`` once per request, after it has mapped the
URI to a filename and checked whether that file exists, and before content
handling. The fixup decides whether the request is a candidate for
correction, splits the filename into the existing parent directory and the
missing name, scans the directory, and answers with one of the FixupStatus
values.

A request is expected to look like this:
    uri:       /correct-url/misspelling/more
    filename:  /correct-file/misspelling
    path_info: /more

Example:
    from urlspell.models import FixupStatus, RequestContext, ServerConfig
    from urlspell.orchestration import SpellingFixup

    fixup = SpellingFixup(ServerConfig(check_spelling=True))
    result = fixup.check_spelling(RequestContext(
        uri="/doc/indx.html",
        filename="/srv/www/doc/indx.html",
    ))
    if result.status is FixupStatus.MOVED_PERMANENTLY:
        print(result.location)
"""

import logging
from typing import Callable, Optional

from urlspell.correction import (
    VARIANT_LIST_NOTE,
    build_redirect_uri,
    decide,
    render_variant_list,
)
from urlspell.models import (
    FixupResult,
    FixupStatus,
    RequestContext,
    ServerConfig,
)
from urlspell.scanning import DirectoryScanner

# Spelling fixes are written to the server log channel
logger = logging.getLogger('urlspell.fixup')


class SpellingFixup:
    """Corrects misspelled request URLs by redirect or a list of choices.

    The fixup keeps no per-request state. Everything it derives lives in the
    returned FixupResult and in the request's ``headers_out`` and ``notes``.

    Attributes:
        config: Server-scoped configuration; ``check_spelling`` enables
            the fixup.

    Example:
        fixup = SpellingFixup(config, url_builder=lambda path: "http://example.com" + path)
        result = fixup.check_spelling(request)
    """

    def __init__(
        self,
        config: ServerConfig,
        url_builder: Optional[Callable[[str], str]] = None,
        scanner: Optional[DirectoryScanner] = None,
    ) -> None:
        """Initialize the SpellingFixup.

        Args:
            config: Server configuration for the requests this fixup serves.
            url_builder: Host callback turning a request path into an absolute
                URL for the Location header. Defaults to
                ``config.construct_url``.
            scanner: DirectoryScanner to use. A new one is created if omitted.
        """
        self.config = config
        self._url_builder = url_builder or config.construct_url
        self._scanner = scanner if scanner is not None else DirectoryScanner()

    def check_spelling(self, request: RequestContext) -> FixupResult:
        """Try to correct the last path component of a request.

        Args:
            request: The request, as translated by the host.

        Returns:
            FixupResult whose status is DECLINED if the request is not a
            candidate for correction, OK if nothing should be corrected,
            MOVED_PERMANENTLY with ``Location`` set in ``headers_out``, or
            MULTIPLE_CHOICES with the variant list stored in ``notes``.
        """
        declined = FixupResult(status=FixupStatus.DECLINED)

        if not self.config.check_spelling:
            return declined

        # We only want to worry about GETs
        if request.method != "GET":
            return declined

        # We've already got a file of some kind or another
        if request.is_proxy_request or request.file_exists:
            return declined

        # This is a sub request - don't mess with it
        if request.is_subrequest:
            return declined

        filoc = request.filename.rfind("/")
        if filoc == -1:
            return declined

        directory = request.filename[:filoc]
        requested = request.filename[filoc + 1:]
        postgood = requested + request.path_info

        # Check to see if the URL pieces add up
        if not request.uri.endswith(postgood):
            return declined

        parent_url = request.uri[: len(request.uri) - len(postgood)]

        scan = self._scanner.scan(directory, requested)
        if scan is None:
            return declined

        # Redirecting to the requested name itself would loop
        if scan.exact_sibling:
            return FixupResult(status=FixupStatus.OK)

        decision = decide(scan.candidates)
        if decision.status is FixupStatus.OK:
            return FixupResult(status=FixupStatus.OK)

        referer = request.referer

        if decision.status is FixupStatus.MOVED_PERMANENTLY:
            new_uri = build_redirect_uri(parent_url, decision.best.name, request.path_info)
            location = self._url_builder(new_uri)
            request.headers_out["Location"] = location

            if referer is not None:
                logger.error(f"Fixed spelling: {request.uri} to {new_uri} from {referer}")
            else:
                logger.error(f"Fixed spelling: {request.uri} to {new_uri}")

            return FixupResult(
                status=FixupStatus.MOVED_PERMANENTLY,
                candidates=decision.candidates,
                new_uri=new_uri,
                location=location,
            )

        variant_list = render_variant_list(request.uri, decision.candidates, referer)
        request.notes[VARIANT_LIST_NOTE] = variant_list

        count = len(decision.candidates)
        if referer is not None:
            logger.warning(f"Spelling fix: {request.uri}: {count} candidates from {referer}")
        else:
            logger.warning(f"Spelling fix: {request.uri}: {count} candidates")

        return FixupResult(
            status=FixupStatus.MULTIPLE_CHOICES,
            candidates=decision.candidates,
            variant_list=variant_list,
        )
