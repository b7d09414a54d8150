"""
Metric Processor — Pending time computation for one project

Reads the project's .gtm directory without modifying it:
- *.event files: one touched path per file, named by unix epoch
- *.metric files: time already allocated by earlier recordings

Events are bucketed into 60 second windows. Each window hands out
its 60 seconds across the files touched in it, weighted by event count.

The processor keeps no state between calls; one instance can serve
any number of projects, sequentially or from worker threads.
"""

import re
from collections import Counter, defaultdict
from pathlib import Path
from typing import Dict, List

import orjson
import xxhash

from ..core.note import CommitNote, FileDetail, GTM_DIR
from ..errors import MetricProcessingError
from .git import GitIntegration, STATUS_READ


WINDOW_SECONDS = 60
EVENT_SUFFIX = ".event"
METRIC_SUFFIX = ".metric"

EVENT_NAME_PATTERN = re.compile(r"^(\d+)(?:-[^.]*)?\.event$")


def metric_file_id(source_file: str) -> str:
    """Stable identifier for a tracked path (metric file stem)."""
    return xxhash.xxh64(source_file.encode()).hexdigest()


def window_for(epoch: int) -> int:
    return epoch - epoch % WINDOW_SECONDS


def allocate_window(counts: Counter) -> Dict[str, int]:
    """
    Split one window's seconds across files by event count.

    The rounding remainder goes to the most active file (ties: path order),
    so every window adds up to exactly WINDOW_SECONDS.
    """
    total = sum(counts.values())
    if total == 0:
        return {}
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    allocation = {path: WINDOW_SECONDS * n // total for path, n in ordered}
    remainder = WINDOW_SECONDS - sum(allocation.values())
    allocation[ordered[0][0]] += remainder
    return allocation


class MetricProcessor:
    """Computes a CommitNote from a project's recorded events and metrics."""

    def process(self, project_path) -> CommitNote:
        """
        Compute pending time for a project.

        Raises:
            MetricProcessingError: .gtm missing, or an event/metric file is unreadable
        """
        project = Path(project_path)
        gtm_dir = project / GTM_DIR
        if not gtm_dir.is_dir():
            raise MetricProcessingError(
                f"Time tracking is not initialized for {project} (missing {GTM_DIR} directory)"
            )

        details: Dict[str, FileDetail] = {}

        for source_file, timeline in self._read_metrics(gtm_dir):
            detail = details.setdefault(source_file, FileDetail(source_file=source_file))
            for window, seconds in timeline.items():
                detail.add(window, seconds)

        for window, counts in sorted(self._read_events(gtm_dir).items()):
            for source_file, seconds in allocate_window(counts).items():
                detail = details.setdefault(source_file, FileDetail(source_file=source_file))
                detail.add(window, seconds)

        statuses = self._statuses(project)
        for detail in details.values():
            if detail.is_app:
                continue
            detail.status = statuses.get(detail.source_file.replace("\\", "/"), STATUS_READ)

        note = CommitNote(files=list(details.values()))
        note.sort()
        return note

    def _read_events(self, gtm_dir: Path) -> Dict[int, Counter]:
        windows: Dict[int, Counter] = defaultdict(Counter)
        for path in gtm_dir.glob(f"*{EVENT_SUFFIX}"):
            match = EVENT_NAME_PATTERN.match(path.name)
            if not match:
                raise MetricProcessingError(f"Corrupt event file name {path}")
            try:
                source_file = path.read_text(encoding="utf-8").strip()
            except (OSError, UnicodeDecodeError) as e:
                raise MetricProcessingError(f"Unable to read event {path}: {e}") from e
            if not source_file:
                raise MetricProcessingError(f"Empty event file {path}")
            windows[window_for(int(match.group(1)))][source_file] += 1
        return windows

    def _read_metrics(self, gtm_dir: Path) -> List[tuple]:
        metrics = []
        for path in sorted(gtm_dir.glob(f"*{METRIC_SUFFIX}")):
            try:
                data = orjson.loads(path.read_bytes())
                source_file = data["source_file"]
                timeline = {int(w): int(s) for w, s in data.get("timeline", {}).items()}
            except (OSError, orjson.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
                raise MetricProcessingError(f"Unable to read metric {path}: {e}") from e
            metrics.append((source_file, timeline))
        return metrics

    def _statuses(self, project: Path) -> Dict[str, str]:
        git = GitIntegration(project)
        root = git.root_path()
        if root is None or Path(root) != project.resolve():
            # Not the root of its own repository: no status to report
            return {}
        statuses = git.file_statuses()
        if statuses is None:
            raise MetricProcessingError(f"Unable to read git status for {project}")
        return statuses
