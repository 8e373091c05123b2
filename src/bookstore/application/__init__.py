"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.services` - :class:`BookService` use case
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    FormatBookInfo,
    GetConfig,
    InitLogging,
)
from .services import BookService

__all__ = [
    "BookService",
    "DisplayConfig",
    "FormatBookInfo",
    "GetConfig",
    "InitLogging",
]
