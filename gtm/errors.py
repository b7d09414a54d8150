"""
Errors — Failure taxonomy for the status pipeline

Every error below is terminal for the command that raised it:
nothing is retried, nothing is downgraded to a warning.
The message is shown to the user as-is (no traceback).
"""


class GTMError(Exception):
    """Base class for all user-facing gtm failures."""


class ConfigurationConflict(GTMError):
    """Mutually exclusive options were requested together."""


class ConfigurationError(ValueError, GTMError):
    """A setting holds a value gtm cannot run with (e.g. GTM_IO_WORKERS=0)."""


class RegistryError(GTMError):
    """Project index unavailable, or the project query failed."""


class MetricProcessingError(GTMError):
    """Pending time for a project could not be computed."""


class RenderError(GTMError):
    """A computed commit note could not be formatted."""


__all__ = [
    "GTMError",
    "ConfigurationConflict",
    "ConfigurationError",
    "RegistryError",
    "MetricProcessingError",
    "RenderError",
]
