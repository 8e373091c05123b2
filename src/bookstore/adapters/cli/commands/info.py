"""Book, metadata, and failure-path CLI commands.

Contents:
    * :func:`cli_show` - Print the formatted demo book.
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_fail` - Trigger intentional failure for testing.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from bookstore import __init__conf__
from bookstore.domain.book import build_demo_book

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_show(ctx: click.Context) -> None:
    """Print the formatted information of the demo book.

    Example:
        >>> from click.testing import CliRunner
        >>> from bookstore.adapters.cli.root import cli
        >>> from bookstore.composition import build_production
        >>> result = CliRunner().invoke(cli, ["show"], obj=build_production)
        >>> result.stdout
        'Title: The Great Gatsby, Author: F. Scott Fitzgerald\\n'
    """
    service = get_cli_context(ctx).services.book_service()
    book = build_demo_book()
    with lib_log_rich.runtime.bind(job_id="cli-show", extra={"command": "show"}):
        logger.info("Formatting book information", extra={"title": book.title, "author": book.author})
        click.echo(service.get_formatted_book_info(book))


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise an intentional error to exercise the failure path."""
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Executing intentional failure command")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_info", "cli_show"]
