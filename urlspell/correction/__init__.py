"""Correction package for urlspell.

This package turns scanned candidates into a response:
- decide(): Ranks candidates and picks redirect, choices or nothing
- build_redirect_uri(): Corrected request path for a redirect
- render_variant_list(): HTML body fragment for "300 Multiple Choices"
"""

from .decision_policy import Decision, decide, rank_candidates
from .variant_renderer import VARIANT_LIST_NOTE, build_redirect_uri, render_variant_list

__all__ = [
    "Decision",
    "decide",
    "rank_candidates",
    "VARIANT_LIST_NOTE",
    "build_redirect_uri",
    "render_variant_list",
]
