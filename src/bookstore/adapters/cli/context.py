"""State shared between the root group and its subcommands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from ..config.loader import validate_profile

if TYPE_CHECKING:
    from bookstore.composition import AppServices


@dataclass(frozen=True, slots=True)
class TracebackState:
    """The two lib_cli_exit_tools traceback flags, which bookstore always moves together.

    Example:
        >>> TracebackState.requested(True)
        TracebackState(enabled=True, force_color=True)
    """

    enabled: bool
    force_color: bool

    @classmethod
    def current(cls) -> TracebackState:
        config = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    @classmethod
    def requested(cls, enabled: bool) -> TracebackState:
        return cls(enabled=bool(enabled), force_color=bool(enabled))

    def apply(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


@dataclass(slots=True)
class CLIContext:
    """What ``bookstore <command>`` finds in ``ctx.obj`` once the root group ran."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the root group's state for a subcommand.

    Raises:
        RuntimeError: The root group has not populated ``ctx.obj`` yet.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized; run commands through the bookstore root group.")
    return ctx.obj


def check_profile(profile: str | None) -> None:
    """Reject a bad ``--profile`` value as a usage error (exit 2).

    Only the name is checked here; failures while reading the profile's
    files surface from the loader unchanged.
    """
    if profile is None:
        return
    try:
        validate_profile(profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc


__all__ = [
    "CLIContext",
    "TracebackState",
    "check_profile",
    "get_cli_context",
]
