"""Render the bookstore configuration for ``bookstore config``."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as render_layered_config
from rich.console import Console

from bookstore.domain.enums import OutputFormat


def _require_section(config: Config, section: str) -> None:
    known = sorted(config.as_dict())
    if section not in known:
        available = ", ".join(known) or "none"
        raise ValueError(f"Section '{section}' not found in bookstore configuration (available: {available})")


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config`` (or one ``section`` of it) as TOML-like text or JSON.

    Pending log records are flushed to stderr first so they never land in
    the middle of the rendered tables.

    Raises:
        ValueError: ``section`` is not a top-level key of ``config``.
    """
    if section is not None:
        _require_section(config, section)
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_layered_config(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
