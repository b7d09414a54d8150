"""
CLI -- Command interface

    gtm status                      pending time for the current project
    gtm status -tags work,oss       pending time for tagged projects
    gtm status -all                 pending time for every project
    gtm status -total-only          just the total, for shell prompts
    gtm config                      show configuration
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import ConfigManager
from .core.project import ProjectIndex
from .services.metric import MetricProcessor
from .orchestrator import OrchestratorConfig
from .presentation.ui import ConsoleUi
from .commands.status import StatusCommand
from .commands.config_cmd import ConfigCommand
from . import __version__


class GTMCli:
    """Resources shared by all commands of one invocation."""

    def __init__(self, project_dir: Path, ui=None):
        self.project_dir = Path(project_dir)
        self.ui = ui or ConsoleUi()

        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()

        self.processor = MetricProcessor()
        self.orchestrator_config = OrchestratorConfig.from_env()

        # Command handlers
        self.status_cmd = StatusCommand(self)
        self.config_cmd = ConfigCommand(self)

    def open_index(self) -> ProjectIndex:
        """Open the project index (RegistryError if it cannot be loaded)."""
        return ProjectIndex(self.config.data.path, cwd=self.project_dir)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gtm',
        description="gtm -- Git time metric status",
        epilog="Shows time tracked but not yet committed."
    )

    parser.add_argument(
        '--project', '-p',
        default=os.environ.get("GTM_PROJECT_PATH", "."),
        help='Project directory (default: GTM_PROJECT_PATH or current)'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'gtm {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Register all commands from command modules (self-registration pattern)
    from .commands import register_all
    register_all(subparsers)

    return parser


def main(argv: Optional[Sequence[str]] = None, ui=None) -> int:
    """
    Main entry point for gtm CLI.

    Returns:
        Process exit code
    """
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on bad flags; gtm reports every failure as 1
        return 0 if e.code in (0, None) else 1

    if not args.command:
        parser.print_help()
        return 1

    cli = GTMCli(Path(args.project), ui=ui)

    from .commands import dispatch
    return dispatch(args.command, cli, args)


if __name__ == '__main__':
    sys.exit(main())
