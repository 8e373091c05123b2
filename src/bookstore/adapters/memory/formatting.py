"""Recording formatter used to observe :class:`BookService` delegation."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.formatter import format_book_info


@dataclass(slots=True)
class FormatterSpy:
    """Callable satisfying FormatBookInfo that records every call.

    Results come from the real :func:`format_book_info`, so output is
    unchanged while ``calls`` captures each ``(title, author)`` pair.

    Example:
        >>> spy = FormatterSpy()
        >>> spy("Dune", "Frank Herbert")
        'Title: Dune, Author: Frank Herbert'
        >>> spy.calls
        [('Dune', 'Frank Herbert')]
    """

    calls: list[tuple[str, str]] = field(default_factory=list)

    def __call__(self, title: str, author: str) -> str:
        self.calls.append((title, author))
        return format_book_info(title, author)


__all__ = ["FormatterSpy"]
