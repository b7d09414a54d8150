"""
ConfigCommand — View and set configuration

    gtm config                          show effective configuration
    gtm config --set status.color=true  set a project value
    gtm config --set data.dir=~/gtm --user
"""

from ..commands.base import BaseCommand


class ConfigCommand(BaseCommand):
    """Command for configuration display and modification."""

    def show_config(self) -> int:
        """Show current configuration."""
        self.ui.write_output(self.config_manager.display())
        return 0

    def set_config(self, key: str, value: str, scope: str = "project") -> int:
        """Set a configuration value."""
        error = self.config_manager.set(key, value, scope=scope)
        if error:
            self.ui.write_error(f"Error: {error}")
            return 1
        self.ui.write_output(f"Set {key} = {value} ({scope})")
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'config'


def register_parser(subparsers):
    """Register config command parser."""
    p = subparsers.add_parser('config', help='View or set configuration')
    p.add_argument('--set', metavar='KEY=VALUE',
                   help='Set config value (e.g., status.terminal_off=true)')
    p.add_argument('--user', action='store_true',
                   help='Apply to user config instead of project')
    return p


def handle(cli, args):
    """Handle config command dispatch."""
    if not args.set:
        return cli.config_cmd.show_config()
    if '=' not in args.set:
        cli.ui.write_error("Error: Use format KEY=VALUE (e.g., status.color=true)")
        return 1
    key, value = args.set.split('=', 1)
    scope = "user" if args.user else "project"
    return cli.config_cmd.set_config(key, value, scope)
