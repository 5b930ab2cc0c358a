"""Terminal UI package for exmap."""

from .report_tui import ReportTUI

__all__ = ["ReportTUI"]
