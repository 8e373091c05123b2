"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..application.services import BookService
from ..domain.formatter import format_book_info

# Static conformance assertions: pyright checks each adapter function
# against its Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.formatting import FormatterSpy
    from ..application.ports import (
        DisplayConfig,
        FormatBookInfo,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_format_book_info: FormatBookInfo = format_book_info


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    format_book_info: FormatBookInfo

    def book_service(self) -> BookService:
        """Return a BookService bound to this container's formatter."""
        return BookService(formatter=self.format_book_info)


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        format_book_info=format_book_info,
    )


def build_testing(*, spy: FormatterSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional FormatterSpy for asserting on formatter calls. When
            None, a fresh FormatterSpy is created.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        FormatterSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    formatter_spy = spy if spy is not None else FormatterSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        format_book_info=formatter_spy,
    )


__all__ = [
    "get_config",
    "display_config",
    "init_logging",
    "format_book_info",
    "AppServices",
    "build_production",
    "build_testing",
]
