"""Exit codes bookstore sets itself.

Click usage errors exit 2 on their own, and lib_cli_exit_tools maps
uncaught exceptions and signals.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by the bookstore CLI.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22


__all__ = ["ExitCode"]
