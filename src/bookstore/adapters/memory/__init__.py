"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that touch neither
the filesystem nor the logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.formatting` - Recording book formatter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .formatting import FormatterSpy
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from bookstore.application.ports import (
        DisplayConfig,
        FormatBookInfo,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_format_book_info: FormatBookInfo = FormatterSpy()

__all__ = [
    "FormatterSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
