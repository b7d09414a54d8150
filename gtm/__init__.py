"""
gtm — Pending time status for git projects

Reports tracked working time not yet committed, for the current
project, for tagged projects, or for every registered project.

Usage:
    gtm status
    gtm status -tags work
    gtm status -all -terminal-off
    gtm status -total-only -long-duration
"""

__version__ = "0.1.0"

# Core layer (data)
from .core.note import CommitNote, FileDetail
from .core.project import ProjectIndex, parse_tags, load_tags, save_tags

# Services layer
from .services.metric import MetricProcessor
from .services.git import GitIntegration

# Presentation layer
from .presentation.report import StatusReport, OutputOptions
from .presentation.ui import ConsoleUi, BufferUi

# Errors
from .errors import (
    GTMError, ConfigurationConflict, ConfigurationError, RegistryError, MetricProcessingError, RenderError
)

# Config (stays at root)
from .config import Config, ConfigManager, get_config

__all__ = [
    # Core
    'CommitNote', 'FileDetail',
    'ProjectIndex', 'parse_tags', 'load_tags', 'save_tags',
    # Services
    'MetricProcessor', 'GitIntegration',
    # Presentation
    'StatusReport', 'OutputOptions', 'ConsoleUi', 'BufferUi',
    # Errors
    'GTMError', 'ConfigurationConflict', 'ConfigurationError', 'RegistryError', 'MetricProcessingError', 'RenderError',
    # Config
    'Config', 'ConfigManager', 'get_config',
]
