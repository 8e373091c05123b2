"""Public package surface exposing the book model, formatting, and configuration.

Imports are routed through the architectural layers:
- Domain exports: :class:`Book` and :func:`format_book_info`
- Application exports: :class:`BookService`
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.services import BookService

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.book import Book, build_demo_book
from .domain.formatter import format_book_info

__all__ = [
    "Book",
    "BookService",
    "build_demo_book",
    "format_book_info",
    "get_config",
    "print_info",
]
