"""
TimeTracker — Opt-in timing for profiling a run

Enabled per invocation (gtm status -profile), never globally.
Each tracked block reports "<name> took <ms>ms" on the error channel,
keeping the report channel clean for piping.
"""

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class TimeTracker:
    """Times named blocks and reports them through a Ui error channel."""
    enabled: bool = False
    ui: Optional[object] = None
    # Worker threads report concurrently in parallel mode
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @contextmanager
    def track(self, name: str) -> Iterator[None]:
        if not self.enabled:
            yield
            return
        start = time.perf_counter()
        try:
            yield
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            if self.ui is not None:
                with self._lock:
                    self.ui.write_error(f"{name} took {duration_ms:.2f}ms")
