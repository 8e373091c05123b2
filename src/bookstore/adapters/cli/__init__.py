"""Command-line interface for bookstore.

Contents:
    * Root command group from :mod:`.root`
    * Runner from :mod:`.main`
    * Commands from :mod:`.commands`
    * Shared context and traceback state from :mod:`.context`
"""

from __future__ import annotations

from .commands import cli_config, cli_fail, cli_info, cli_show
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, TracebackState, check_profile, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "check_profile",
    "cli",
    "cli_config",
    "cli_fail",
    "cli_info",
    "cli_show",
    "get_cli_context",
    "main",
]
