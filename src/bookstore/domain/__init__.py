"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.book` - The immutable :class:`Book` entity and the demo book
    * :mod:`.formatter` - Book information formatting
    * :mod:`.enums` - Domain enumerations (OutputFormat)
"""

from __future__ import annotations

from .book import DEMO_AUTHOR, DEMO_TITLE, Book, build_demo_book
from .enums import OutputFormat
from .formatter import BOOK_INFO_TEMPLATE, format_book_info

__all__ = [
    # Entities
    "DEMO_AUTHOR",
    "DEMO_TITLE",
    "Book",
    "build_demo_book",
    # Formatting
    "BOOK_INFO_TEMPLATE",
    "format_book_info",
    # Enums
    "OutputFormat",
]
