"""
OrchestratorConfig — Configuration for per-project parallel execution

Loads parallelization settings from environment variables.
Sequential by default: the report is identical either way.

Environment variables:
- GTM_PARALLEL_ENABLED: Run the per-project loop on a thread pool (default: false)
- GTM_IO_WORKERS: Thread pool size (default: 4)
"""

import os
from dataclasses import dataclass

from ..errors import ConfigurationError


@dataclass
class OrchestratorConfig:
    """Configuration for the per-project runner."""

    enabled: bool = False
    io_workers: int = 4

    @classmethod
    def from_env(cls) -> 'OrchestratorConfig':
        """Load configuration from environment variables."""
        return cls(
            enabled=_get_bool_env("GTM_PARALLEL_ENABLED", False),
            io_workers=_get_int_env("GTM_IO_WORKERS", 4),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: io_workers below 1
        """
        if self.io_workers < 1:
            raise ConfigurationError(f"GTM_IO_WORKERS must be >= 1 (got {self.io_workers})")


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def _get_int_env(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key, "")
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default
