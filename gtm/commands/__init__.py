"""
Commands — Modular CLI command implementations with self-registration

Each command module:
1. Defines XxxCommand class (handler implementation)
2. Exports register_parser(subparsers) to configure its argparse
3. Exports handle(cli, args) to dispatch to handler methods
"""

import importlib
from typing import Dict, Callable, Any

from .base import BaseCommand

# Command modules that participate in auto-registration
# Order determines help display order
COMMAND_MODULES = [
    'status',
    'config_cmd',
]

# Handler registry: command_name -> handle function
_handlers: Dict[str, Callable] = {}


def register_all(subparsers) -> None:
    """
    Discover and register all command parsers.

    Imports each module in COMMAND_MODULES and calls its register_parser()
    function. Also registers the handle() function for dispatch.

    Args:
        subparsers: argparse subparsers object from main parser
    """
    _handlers.clear()

    for module_name in COMMAND_MODULES:
        module = importlib.import_module(f'.{module_name}', __package__)

        if hasattr(module, 'register_parser'):
            module.register_parser(subparsers)

        if hasattr(module, 'handle'):
            # Derive from module name: 'status' -> 'status', 'config_cmd' -> 'config'
            cmd_name = getattr(module, 'COMMAND_NAME', None) or module_name.replace('_cmd', '')
            for name in getattr(module, 'COMMAND_NAMES', [cmd_name]):
                _handlers[name] = module.handle


def dispatch(command: str, cli: Any, args: Any) -> Any:
    """
    Dispatch command to its registered handler.

    Args:
        command: Command name from args.command
        cli: GTMCli instance
        args: Parsed argparse arguments

    Returns:
        Result from handler (exit code)

    Raises:
        KeyError: If command not registered
    """
    if command not in _handlers:
        raise KeyError(f"Unknown command: {command}. Available: {list(_handlers.keys())}")

    return _handlers[command](cli, args)


__all__ = ['BaseCommand', 'register_all', 'dispatch']
