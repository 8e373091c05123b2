"""Pure formatting of book information for display."""

from __future__ import annotations

TITLE_LABEL = "Title"
AUTHOR_LABEL = "Author"
BOOK_INFO_TEMPLATE = f"{TITLE_LABEL}: {{title}}, {AUTHOR_LABEL}: {{author}}"


def format_book_info(title: str, author: str) -> str:
    r"""Render ``title`` and ``author`` as a single display line.

    Inputs are interpolated verbatim: nothing is escaped, trimmed, or
    rejected, so empty strings and strings that already contain the labels
    pass straight through.

    Args:
        title: Book title.
        author: Author name.

    Returns:
        ``"Title: <title>, Author: <author>"``.

    Example:
        >>> format_book_info("The Great Gatsby", "F. Scott Fitzgerald")
        'Title: The Great Gatsby, Author: F. Scott Fitzgerald'
        >>> format_book_info("", "")
        'Title: , Author: '
    """
    return BOOK_INFO_TEMPLATE.format(title=title, author=author)


__all__ = [
    "AUTHOR_LABEL",
    "BOOK_INFO_TEMPLATE",
    "TITLE_LABEL",
    "format_book_info",
]
