"""CLI command implementations.

Contents:
    * Book and metadata commands from :mod:`.info`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_fail, cli_info, cli_show

__all__ = [
    "cli_config",
    "cli_fail",
    "cli_info",
    "cli_show",
]
