"""
Presentation — Display layer for gtm

Contains display and formatting:
- Formatters: Durations and percentages
- Report: CommitNote rendering (detailed or total-only)
- Ui: Output sink with separate report and error channels
"""

from .formatters import format_duration, format_duration_long, format_percent
from .report import StatusReport, OutputOptions
from .ui import ConsoleUi, BufferUi, safe_print

__all__ = [
    # Formatters
    "format_duration", "format_duration_long", "format_percent",
    # Report
    "StatusReport", "OutputOptions",
    # Ui
    "ConsoleUi", "BufferUi", "safe_print",
]
