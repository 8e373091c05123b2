"""Book entity: an immutable title/author pair."""

from __future__ import annotations

from dataclasses import dataclass

DEMO_TITLE = "The Great Gatsby"
DEMO_AUTHOR = "F. Scott Fitzgerald"


@dataclass(frozen=True, slots=True)
class Book:
    """Immutable record of a title and an author.

    Both fields are stored verbatim; no trimming or validation happens at
    construction time.

    Attributes:
        title: Book title as supplied by the caller.
        author: Author name as supplied by the caller.

    Example:
        >>> book = Book("Dune", "Frank Herbert")
        >>> book.title
        'Dune'
        >>> book.author
        'Frank Herbert'
    """

    title: str
    author: str


def build_demo_book() -> Book:
    """Return the book printed by the default ``bookstore`` run.

    Example:
        >>> build_demo_book()
        Book(title='The Great Gatsby', author='F. Scott Fitzgerald')
    """
    return Book(DEMO_TITLE, DEMO_AUTHOR)


__all__ = [
    "DEMO_AUTHOR",
    "DEMO_TITLE",
    "Book",
    "build_demo_book",
]
