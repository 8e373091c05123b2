"""Process-level runner for the bookstore CLI.

``main([])`` is the everyday path: the root group has no subcommand, falls
through to ``show``, prints the demo book line on stdout and returns 0.
Every other outcome is turned into an exit code here instead of escaping
as an exception.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from bookstore import __init__conf__

from .context import TracebackState
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from bookstore.composition import AppServices

#: Characters of exception text printed without ``--traceback``.
SUMMARY_LIMIT = 500
#: Characters of traceback printed with ``--traceback``.
VERBOSE_LIMIT = 10_000


def _report_failure(exc: BaseException) -> int:
    verbose = TracebackState.current().enabled
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=VERBOSE_LIMIT if verbose else SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # standalone_mode=False lets the factory travel in ctx.obj and keeps
    # exit handling here rather than in Click.
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_failure(exc)
    return ExitCode.SUCCESS


def _shutdown_logging() -> None:
    # Worker threads must not tear down the runtime the main thread still uses.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run bookstore with ``argv`` (``sys.argv[1:]`` when omitted) and return the exit code.

    Args:
        argv: Command-line arguments; an empty list prints the demo book.
        restore_traceback: Put the traceback flags back the way they were
            once the run ends.
        services_factory: Builds the :class:`AppServices` the commands use,
            usually ``build_production``.

    Raises:
        ValueError: ``services_factory`` is missing.

    Example:
        >>> from bookstore.composition import build_production
        >>> main([], services_factory=build_production)  # doctest: +SKIP
        Title: The Great Gatsby, Author: F. Scott Fitzgerald
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass bookstore.composition.build_production.")

    args = list(argv) if argv is not None else sys.argv[1:]
    saved = TracebackState.current()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            saved.apply()
        _shutdown_logging()


__all__ = ["SUMMARY_LIMIT", "VERBOSE_LIMIT", "main"]
