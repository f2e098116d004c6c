"""
Models package for the URL spelling-correction fixup.

This package provides convenient imports for all data models:
- Similarity: Ordinal similarity classes, best first
- Candidate: Directory entry proposed as a correction
- ScanResult: Candidates found in one directory
- RequestContext: Host request state
- ServerConfig: Server-scoped configuration
- FixupStatus: Fixup return values
- FixupResult: Fixup outcome
"""

from .similarity import Similarity
from .data_models import (
    Candidate,
    FixupResult,
    FixupStatus,
    RequestContext,
    ScanResult,
    ServerConfig,
)

__all__ = [
    "Similarity",
    "Candidate",
    "FixupResult",
    "FixupStatus",
    "RequestContext",
    "ScanResult",
    "ServerConfig",
]
