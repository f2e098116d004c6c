"""urlspell - URL spelling correction for HTTP origin servers.

A fixup stage that recovers from typing errors in the last component of a
request path. When the requested file is missing, its siblings are graded
for a single typing error; a unique best match is answered with a permanent
redirect, several equally good matches with a "300 Multiple Choices" list.
"""

__version__ = "0.1.0"

from .models import (
    Candidate,
    FixupResult,
    FixupStatus,
    RequestContext,
    ScanResult,
    ServerConfig,
    Similarity,
)
from .orchestration import SpellingFixup

__all__ = [
    "__version__",
    "Candidate",
    "FixupResult",
    "FixupStatus",
    "RequestContext",
    "ScanResult",
    "ServerConfig",
    "Similarity",
    "SpellingFixup",
]

