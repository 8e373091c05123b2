"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the package reports consistent metadata
whether it runs from an installed wheel or a source checkout. The
``LAYEREDCONF_*`` identifiers drive lib_layered_config path resolution.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * :func:`print_info` - Render the metadata block for ``bookstore info``.
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in pyproject.toml.
name: Final[str] = "bookstore"
#: Human-readable summary shown in CLI help output.
title: Final[str] = "Format book information from the command line"
#: Current release version, kept in sync with pyproject.toml.
version = "1.0.0"
#: Repository homepage.
homepage: Final[str] = "https://github.com/bookstore/bookstore"
#: Author attribution.
author: Final[str] = "BookStore Maintainers"
#: Contact email.
author_email: Final[str] = "maintainers@bookstore.invalid"
#: Console-script name published by the package.
shell_command: Final[str] = "bookstore"

#: Vendor directory name used on macOS and Windows config paths.
LAYEREDCONF_VENDOR: Final[str] = "bookstore"
#: Application directory name used on macOS and Windows config paths.
LAYEREDCONF_APP: Final[str] = "Bookstore"
#: Slug used for XDG config paths and environment variable prefixes.
LAYEREDCONF_SLUG: Final[str] = "bookstore"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for bookstore:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
