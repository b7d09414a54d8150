"""
CommitNote — Pending time record for a single project

A note is a list of FileDetail entries. Each entry carries the seconds
spent on one tracked path, bucketed by minute window.

Time categories are derived from the source path:
- Terminal:    .gtm/terminal.app
- Application: any other .gtm/<name>.app
- Source file: everything else
"""

from dataclasses import dataclass, field
from typing import Dict, List


GTM_DIR = ".gtm"
APP_SUFFIX = ".app"
TERMINAL_APP = "terminal"


@dataclass
class FileDetail:
    """Time spent on one tracked path."""
    source_file: str
    time_spent: int = 0
    timeline: Dict[int, int] = field(default_factory=dict)
    status: str = "r"  # r=read, m=modified, d=deleted

    @property
    def is_app(self) -> bool:
        """True for any application entry (terminal included)."""
        parts = self.source_file.replace("\\", "/").split("/")
        return len(parts) == 2 and parts[0] == GTM_DIR and parts[1].endswith(APP_SUFFIX)

    @property
    def app_name(self) -> str:
        if not self.is_app:
            return ""
        return self.source_file.replace("\\", "/").split("/")[-1][:-len(APP_SUFFIX)]

    @property
    def is_terminal(self) -> bool:
        return self.is_app and self.app_name == TERMINAL_APP

    @property
    def is_application(self) -> bool:
        """Application time other than the terminal."""
        return self.is_app and not self.is_terminal

    @property
    def display_name(self) -> str:
        """Name shown in reports (apps by title, files by path)."""
        if self.is_app:
            return self.app_name.capitalize()
        return self.source_file

    def add(self, window: int, seconds: int) -> None:
        self.timeline[window] = self.timeline.get(window, 0) + seconds
        self.time_spent += seconds


@dataclass
class CommitNote:
    """Pending (uncommitted) time for one project."""
    files: List[FileDetail] = field(default_factory=list)

    def visible_files(self, terminal_off: bool = False,
                      application_off: bool = False) -> List[FileDetail]:
        """Files left after excluding the switched-off categories."""
        visible = []
        for f in self.files:
            if terminal_off and f.is_terminal:
                continue
            if application_off and f.is_application:
                continue
            visible.append(f)
        return visible

    def total(self, terminal_off: bool = False, application_off: bool = False) -> int:
        """Total pending seconds over the visible categories."""
        return sum(f.time_spent for f in self.visible_files(terminal_off, application_off))

    @property
    def terminal_time(self) -> int:
        return sum(f.time_spent for f in self.files if f.is_terminal)

    @property
    def application_time(self) -> int:
        return sum(f.time_spent for f in self.files if f.is_application)

    def sort(self) -> None:
        """Order by time spent (descending), then by path."""
        self.files.sort(key=lambda f: (-f.time_spent, f.source_file))
