"""Shared pytest fixtures for CLI and module-entry tests.

All shared fixtures live here; tests pick them up through conftest
discovery. Fixture names read as plain English.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from bookstore.adapters.memory import FormatterSpy
    from bookstore.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for command output so log records written to
    stderr never contaminate assertions.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Example:
        def test_show(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["show"], obj=production_factory)
            assert result.exit_code == 0
    """
    from bookstore.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Start each test from an empty configuration cache."""
    from bookstore.adapters.config import clear_config_cache as _clear

    _clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced; the Config object
    and every other adapter stay real.

    Example:
        def test_config_display(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"section": {"key": "value"}}))
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "key" in result.stdout
    """
    from bookstore.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            format_book_info=prod.format_book_info,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it receives."""
    from bookstore.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            format_book_info=prod.format_book_info,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_format_book_info() -> Callable[[FormatterSpy], Callable[[], AppServices]]:
    """Return a factory that wires a FormatterSpy into production services.

    Example:
        def test_show_delegates(cli_runner, inject_format_book_info) -> None:
            spy = FormatterSpy()
            result = cli_runner.invoke(cli, ["show"], obj=inject_format_book_info(spy))
            assert spy.calls == [("The Great Gatsby", "F. Scott Fitzgerald")]
    """
    from bookstore.composition import AppServices, build_production

    def _inject(spy: FormatterSpy) -> Callable[[], AppServices]:
        prod = build_production()
        test_services = AppServices(
            get_config=prod.get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            format_book_info=spy,
        )
        return lambda: test_services

    return _inject
