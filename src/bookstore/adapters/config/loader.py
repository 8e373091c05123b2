"""Layered configuration for bookstore.

The bundled ``defaultconfig.toml`` only carries the ``[lib_log_rich]``
section; app, host, user, dotenv and environment layers may extend it.
Each ``(profile, start_dir)`` pair is read once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from bookstore import __init__conf__

_DEFAULT_FILE = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str) -> None:
    """Reject profile names lib_layered_config would refuse to resolve.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../shelf")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../shelf
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


def get_default_config_path() -> Path:
    """Return the bundled defaults file.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_FILE


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged bookstore configuration.

    Raises:
        ValueError: ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("lib_log_rich.service")
        'bookstore'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Forget every cached read so the next ``get_config()`` hits disk again."""
    _read_layers.cache_clear()


__all__ = [
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
