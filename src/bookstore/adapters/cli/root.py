"""The ``bookstore`` command group.

Without a subcommand the group runs ``show``, so a bare ``bookstore``
prints the demo book.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from bookstore import __init__conf__

from .commands import cli_config, cli_fail, cli_info, cli_show
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, TracebackState, check_profile

if TYPE_CHECKING:
    from bookstore.composition import AppServices


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Load configuration and logging, then run the subcommand or ``show``.

    ``ctx.obj`` arrives as a services factory and leaves as a
    :class:`CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from bookstore.composition import build_production
        >>> CliRunner().invoke(cli, [], obj=build_production).stdout
        'Title: The Great Gatsby, Author: F. Scott Fitzgerald\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("bookstore needs a services factory in ctx.obj; use bookstore.adapters.cli.main().")
    check_profile(profile)
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    services.init_logging(config)
    ctx.obj = CLIContext(traceback=traceback, config=config, services=services, profile=profile)
    TracebackState.requested(traceback).apply()

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_show)


for _command in (cli_show, cli_info, cli_fail, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]
