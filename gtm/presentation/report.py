"""
StatusReport — Renders one project's CommitNote as text

Two shapes:
- total-only: a single duration, never colored, no trailing newline
- detailed:   one line per tracked path plus a project total line

Color is decided once per report instance:
- options.color forces ANSI codes (for pagers: gtm status -color | less -R)
- otherwise codes are used only when the sink is interactive
"""

import os
from dataclasses import dataclass
from pathlib import Path

from colorama import Fore, Style

from ..core.note import CommitNote
from ..core.project import load_tags
from ..errors import RenderError
from .formatters import format_duration, format_duration_long, format_percent


DURATION_WIDTH = 14
PERCENT_WIDTH = 6

STATUS_COLORS = {
    "m": Fore.GREEN,
    "d": Fore.RED,
    "r": "",
}


@dataclass(frozen=True)
class OutputOptions:
    """Rendering switches shared by every project in one invocation."""
    total_only: bool = False
    long_duration: bool = False
    terminal_off: bool = False
    application_off: bool = False
    color: bool = False


class StatusReport:
    """Formats pending time for display."""

    def __init__(self, interactive: bool = False):
        """
        Args:
            interactive: True when the output sink is a terminal
        """
        self.interactive = interactive

    def _use_color(self, options: OutputOptions) -> bool:
        if options.total_only:
            return False
        return options.color or self.interactive

    @staticmethod
    def _colorize(text: str, color: str, enabled: bool) -> str:
        if not enabled or not color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def render(self, note: CommitNote, options: OutputOptions, project_path: str) -> str:
        """
        Render a note for one project.

        Raises:
            RenderError: note is not a CommitNote or holds invalid durations
            RegistryError: the project tags file cannot be read
        """
        if not isinstance(note, CommitNote):
            raise RenderError(f"Cannot render status for {project_path}: no commit note")

        try:
            if options.total_only:
                return self._render_total(note, options)
            return self._render_detail(note, options, project_path)
        except ValueError as e:
            raise RenderError(f"Cannot render status for {project_path}: {e}") from e

    def _render_total(self, note: CommitNote, options: OutputOptions) -> str:
        total = note.total(options.terminal_off, options.application_off)
        if options.long_duration:
            return format_duration_long(total)
        return format_duration(total)

    def _render_detail(self, note: CommitNote, options: OutputOptions, project_path: str) -> str:
        color = self._use_color(options)
        files = note.visible_files(options.terminal_off, options.application_off)
        total = sum(f.time_spent for f in files)

        lines = [""]
        for f in files:
            duration = self._colorize(format_duration(f.time_spent).rjust(DURATION_WIDTH), Fore.YELLOW, color)
            percent = format_percent(f.time_spent, total).rjust(PERCENT_WIDTH)
            status = self._colorize(f"[{f.status}]", STATUS_COLORS.get(f.status, ""), color)
            lines.append(f"{duration}  {percent}  {status} {f.display_name}")

        lines.append(self._total_line(total, project_path, color))
        return "\n".join(lines) + "\n"

    def _total_line(self, total: int, project_path: str, color: bool) -> str:
        duration = format_duration(total).rjust(DURATION_WIDTH)
        if color:
            duration = f"{Style.BRIGHT}{duration}{Style.RESET_ALL}"
        name = self._colorize(os.path.basename(str(Path(project_path))), Fore.CYAN, color)
        tags = load_tags(project_path)
        line = f"{duration}  {' ' * PERCENT_WIDTH}  {name}"
        if tags:
            line += f" [{' '.join(tags)}]"
        return line
