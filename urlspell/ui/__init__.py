"""Terminal display package for urlspell."""

from .report_tui import ReportTUI

__all__ = ["ReportTUI"]
