"""
Tests for the orchestrator — ordered fail-fast execution and timing

Tests verify:
- Results in item order, sequential or parallel
- Earliest failing item wins, regardless of completion order
- Environment configuration
- TimeTracker only reports when enabled
"""

import threading
import time

import pytest

from gtm.errors import ConfigurationError
from gtm.orchestrator import run_ordered, TimeTracker
from gtm.orchestrator.config import OrchestratorConfig
from gtm.presentation.ui import BufferUi


@pytest.fixture
def parallel():
    return OrchestratorConfig(enabled=True, io_workers=4)


class TestRunOrdered:

    def test_sequential_without_config(self):
        assert run_ordered(lambda x: x * 2, [1, 2, 3]) == [2, 4, 6]

    def test_empty(self, parallel):
        assert run_ordered(lambda x: x, [], parallel) == []

    def test_parallel_keeps_order(self, parallel):
        def slow_first(x):
            time.sleep(0.05 if x == 0 else 0)
            return x

        assert run_ordered(slow_first, list(range(8)), parallel) == list(range(8))

    def test_parallel_runs_on_worker_threads(self, parallel):
        names = []
        lock = threading.Lock()

        def record(x):
            with lock:
                names.append(threading.current_thread().name)
            return x

        run_ordered(record, [1, 2, 3], parallel)
        assert all(n.startswith("gtm-io-") for n in names)

    def test_earliest_failure_wins(self, parallel):
        def fn(x):
            if x == 1:
                time.sleep(0.05)
                raise ValueError("first by order")
            if x == 2:
                raise ValueError("first to complete")
            return x

        with pytest.raises(ValueError, match="first by order"):
            run_ordered(fn, [0, 1, 2], parallel)

    def test_sequential_stops_at_failure(self):
        seen = []

        def fn(x):
            seen.append(x)
            if x == 1:
                raise ValueError("stop")
            return x

        with pytest.raises(ValueError):
            run_ordered(fn, [0, 1, 2], OrchestratorConfig(enabled=False))
        assert seen == [0, 1]

    def test_invalid_workers(self):
        with pytest.raises(ConfigurationError, match="GTM_IO_WORKERS"):
            run_ordered(lambda x: x, [1, 2], OrchestratorConfig(enabled=True, io_workers=0))

    def test_invalid_workers_checked_for_single_item(self):
        with pytest.raises(ConfigurationError):
            run_ordered(lambda x: x, [1], OrchestratorConfig(enabled=True, io_workers=0))

    def test_invalid_workers_ignored_when_sequential(self):
        assert run_ordered(lambda x: x, [1, 2], OrchestratorConfig(enabled=False, io_workers=0)) == [1, 2]


class TestOrchestratorConfig:

    def test_defaults_sequential(self):
        config = OrchestratorConfig.from_env()
        assert config.enabled is False
        assert config.io_workers == 4

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("GTM_PARALLEL_ENABLED", "yes")
        monkeypatch.setenv("GTM_IO_WORKERS", "8")

        config = OrchestratorConfig.from_env()

        assert config.enabled is True
        assert config.io_workers == 8

    def test_bad_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("GTM_IO_WORKERS", "many")
        assert OrchestratorConfig.from_env().io_workers == 4


class TestTimeTracker:

    def test_disabled_is_silent(self):
        ui = BufferUi()
        tracker = TimeTracker(enabled=False, ui=ui)

        with tracker.track("work"):
            pass

        assert ui.errors == []

    def test_enabled_reports_on_error_channel(self):
        ui = BufferUi()
        tracker = TimeTracker(enabled=True, ui=ui)

        with tracker.track("work"):
            pass

        assert len(ui.errors) == 1
        assert ui.errors[0].startswith("work took ")
        assert ui.errors[0].endswith("ms")
        assert ui.report == ""

    def test_reports_even_when_block_raises(self):
        ui = BufferUi()
        tracker = TimeTracker(enabled=True, ui=ui)

        with pytest.raises(RuntimeError):
            with tracker.track("boom"):
                raise RuntimeError("x")

        assert ui.errors[0].startswith("boom took")
