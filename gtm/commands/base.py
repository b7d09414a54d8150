"""
BaseCommand — Shared foundation for all CLI commands

Provides access to CLI resources via composition.
Commands receive the CLI instance and access its resources through properties.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..cli import GTMCli


class BaseCommand:
    """
    Base class for CLI commands with access to shared resources.

    Commands don't reinitialize resources — they access them via the CLI instance.
    """

    def __init__(self, cli: 'GTMCli'):
        """
        Initialize command with CLI instance.

        Args:
            cli: The main GTMCli instance holding all resources
        """
        self._cli = cli

    @property
    def project_dir(self):
        """Directory the command was invoked for."""
        return self._cli.project_dir

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def config_manager(self):
        """Layered config loader (used by gtm config)."""
        return self._cli.config_manager

    @property
    def ui(self):
        """Output sink (report, raw and error channels)."""
        return self._cli.ui

    @property
    def processor(self):
        """Metric processor computing commit notes."""
        return self._cli.processor

    @property
    def orchestrator_config(self):
        """Parallel execution settings."""
        return self._cli.orchestrator_config
