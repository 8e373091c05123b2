"""Use cases orchestrating domain entities and formatting."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.book import Book
from ..domain.formatter import format_book_info
from .ports import FormatBookInfo


@dataclass(frozen=True, slots=True)
class BookService:
    """Turn a :class:`Book` into its display string.

    The formatter is a port so tests can observe the delegation; production
    code uses the default :func:`~bookstore.domain.formatter.format_book_info`.

    Example:
        >>> from bookstore.domain.book import Book
        >>> BookService().get_formatted_book_info(Book("Dune", "Frank Herbert"))
        'Title: Dune, Author: Frank Herbert'
    """

    formatter: FormatBookInfo = format_book_info

    def get_formatted_book_info(self, book: Book) -> str:
        """Return the formatter's rendering of ``book`` unchanged."""
        return self.formatter(book.title, book.author)


__all__ = ["BookService"]
