"""Click settings shared by every bookstore command."""

from __future__ import annotations

from typing import Final

#: ``-h`` works everywhere ``--help`` does.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


__all__ = ["CLICK_CONTEXT_SETTINGS"]
