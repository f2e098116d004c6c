"""
Core data models for the URL spelling-correction fixup.

This module contains the following types:
- Candidate: A directory entry that plausibly matches a mistyped name
- ScanResult: The outcome of scanning a parent directory
- RequestContext: The request state the fixup reads and mutates
- ServerConfig: Server-scoped configuration threaded through each request
- FixupStatus: What the fixup tells the host pipeline to do next
- FixupResult: The status plus everything the fixup produced
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import quote

from .similarity import Similarity


@dataclass(frozen=True)
class Candidate:
    """A directory entry considered as a correction for the requested name."""
    name: str                         # Entry name as read from the directory
    similarity: Similarity            # How close it is to the requested name


@dataclass
class ScanResult:
    """Candidates collected from one directory, in enumeration order."""
    candidates: List[Candidate] = field(default_factory=list)
    exact_sibling: bool = False       # An entry byte-equal to the request exists


@dataclass
class RequestContext:
    """Request state owned by the host and handed to the fixup.

    The host guarantees that ``uri`` ends with the basename of ``filename``
    followed by ``path_info``. ``headers_out`` and ``notes`` are written to
    by the fixup; everything else is read-only.
    """
    uri: str                          # Request path as seen by the client
    filename: str                     # Longest existing prefix mapped to disk
    path_info: str = ""               # Remainder of the URI past filename
    method: str = "GET"
    file_exists: bool = False         # Whether filename resolved to an entry
    is_subrequest: bool = False
    is_proxy_request: bool = False
    headers_in: Dict[str, str] = field(default_factory=dict)
    headers_out: Dict[str, str] = field(default_factory=dict)
    notes: Dict[str, str] = field(default_factory=dict)

    @property
    def referer(self) -> Optional[str]:
        """Inbound Referer header, looked up case-insensitively."""
        for name, value in self.headers_in.items():
            if name.lower() == "referer":
                return value
        return None


@dataclass
class ServerConfig:
    """Server-scoped configuration.

    Only ``check_spelling`` affects the fixup itself; the remaining fields are
    used by the host to build absolute URLs and to locate documents.
    """
    check_spelling: bool = False      # CheckSpelling On|Off, default Off
    server_name: str = "localhost"
    port: int = 80
    scheme: str = "http"
    document_root: Optional[Path] = None

    def __post_init__(self) -> None:
        if not 0 < self.port <= 65535:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")
        if self.scheme not in ("http", "https"):
            raise ValueError(f"scheme must be 'http' or 'https', got {self.scheme!r}")

    def construct_url(self, path: str) -> str:
        """Build an absolute URL for a request path on this server.

        The port is left out when it is the default for the scheme.

        Example:
            >>> ServerConfig(server_name="example.com").construct_url("/doc/index.html")
            'http://example.com/doc/index.html'
        """
        host = self.server_name
        if self.port != _DEFAULT_PORTS[self.scheme]:
            host = f"{host}:{self.port}"
        escaped = quote(path, safe=_URL_PATH_SAFE, errors="surrogateescape")
        return f"{self.scheme}://{host}{escaped}"


_DEFAULT_PORTS = {"http": 80, "https": 443}

# Characters left unescaped in the path of a constructed URL
_URL_PATH_SAFE = "/:@!$&'()*+,;="


class FixupStatus(Enum):
    """Return values of the fixup, as understood by the host pipeline."""
    DECLINED = "declined"                    # Not our concern, continue
    OK = "ok"                                # Handled, no redirect
    MOVED_PERMANENTLY = "moved_permanently"  # Location header is set
    MULTIPLE_CHOICES = "multiple_choices"    # variant-list note is set

    @property
    def http_status(self) -> Optional[int]:
        """HTTP status code the host must emit, or None to continue."""
        return _HTTP_STATUS.get(self)


_HTTP_STATUS = {
    FixupStatus.MOVED_PERMANENTLY: 301,
    FixupStatus.MULTIPLE_CHOICES: 300,
}


@dataclass
class FixupResult:
    """Outcome of one fixup invocation."""
    status: FixupStatus
    candidates: List[Candidate] = field(default_factory=list)  # Best first
    new_uri: Optional[str] = None     # Corrected path for redirects
    location: Optional[str] = None    # Absolute URL sent in Location
    variant_list: Optional[str] = None  # HTML fragment for 300 responses
