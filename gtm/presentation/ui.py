"""
Ui — Output sink passed into commands

Three channels:
- write_output(): report text through the color-capable stream
- write_raw():    report text verbatim, no newline, no color handling
- write_error():  error channel (stderr), never mixed with report text

Commands receive a Ui instead of printing, so tests can capture
each channel separately.
"""

import sys
from typing import List, Optional, TextIO

from colorama import AnsiToWin32


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    Print with graceful encoding fallback.

    Unencodable characters are replaced with '?' rather than
    aborting the whole report.
    """
    if file is None:
        file = sys.stdout

    try:
        print(text, end=end, file=file)
    except UnicodeEncodeError:
        encoding = getattr(file, 'encoding', 'utf-8') or 'utf-8'
        encoded = text.encode(encoding, errors='replace')
        print(encoded.decode(encoding), end=end, file=file)


class ConsoleUi:
    """Ui bound to process streams (stdout/stderr by default)."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        """
        Args:
            out: Report stream (default: sys.stdout)
            err: Error stream (default: sys.stderr)
        """
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    @property
    def is_interactive(self) -> bool:
        isatty = getattr(self.out, "isatty", None)
        return bool(isatty and isatty())

    def _color_stream(self) -> TextIO:
        # Reports decide on color themselves; only translate for legacy Windows consoles
        return AnsiToWin32(self.out, strip=False).stream

    def write_output(self, text: str) -> None:
        safe_print(text, file=self._color_stream())

    def write_raw(self, text: str) -> None:
        safe_print(text, end='', file=self.out)
        self.out.flush()

    def write_error(self, text: str) -> None:
        safe_print(text, file=self.err)


class BufferUi:
    """Ui that records everything written (tests, embedding)."""

    def __init__(self, interactive: bool = False):
        self.interactive = interactive
        self.output: List[str] = []
        self.raw: List[str] = []
        self.errors: List[str] = []

    @property
    def is_interactive(self) -> bool:
        return self.interactive

    def write_output(self, text: str) -> None:
        self.output.append(text)

    def write_raw(self, text: str) -> None:
        self.raw.append(text)

    def write_error(self, text: str) -> None:
        self.errors.append(text)

    @property
    def report(self) -> str:
        """Everything written to the report channels."""
        return "".join(self.output) + "".join(self.raw)
