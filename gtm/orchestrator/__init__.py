"""
Orchestrator — Ordered, fail-fast execution of per-project work

Usage:
    from gtm.orchestrator import run_ordered, OrchestratorConfig

    results = run_ordered(render_project, projects, OrchestratorConfig.from_env())

Results always come back in item order. The first failure in item
order is raised (not the first to complete), and work not yet started
is cancelled. With parallelization disabled, items run one by one.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence

from .config import OrchestratorConfig
from .timing import TimeTracker


def run_ordered(
    fn: Callable[[Any], Any],
    items: Sequence[Any],
    config: Optional[OrchestratorConfig] = None
) -> List[Any]:
    """
    Apply fn to each item, returning results in item order.

    Args:
        fn: Function to apply; must not share mutable state between calls
        items: Items to process
        config: Parallel settings (None: sequential)

    Raises:
        ConfigurationError: parallel mode with an invalid worker count
        Whatever fn raised for the earliest failing item
    """
    if config is None or not config.enabled:
        return [fn(item) for item in items]

    config.validate()
    if len(items) <= 1:
        return [fn(item) for item in items]

    with ThreadPoolExecutor(max_workers=config.io_workers,
                            thread_name_prefix="gtm-io-") as executor:
        futures = [executor.submit(fn, item) for item in items]
        results = []
        try:
            for future in futures:
                results.append(future.result())
        except BaseException:
            for future in futures:
                future.cancel()
            raise
        return results


__all__ = ['run_ordered', 'OrchestratorConfig', 'TimeTracker']
