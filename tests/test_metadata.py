"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    """Return ``[tool.hatch.build.targets.wheel]`` or an empty dict."""
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    build_table = cast(dict[str, Any], hatch_table.get("build", {}))
    targets_table = cast(dict[str, Any], build_table.get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info outputs package metadata."""
    from bookstore import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for bookstore:" in captured
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    """Static metadata constants are populated."""
    from bookstore import __init__conf__

    assert __init__conf__.name == "bookstore"
    assert __init__conf__.version
    assert __init__conf__.shell_command == "bookstore"


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    """PEP 561 py.typed marker exists in the package source."""
    py_typed = PROJECT_ROOT / "src" / "bookstore" / "py.typed"
    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
def test_wheel_includes_py_typed_and_default_config() -> None:
    """The wheel ships py.typed and the bundled defaultconfig.toml."""
    includes = cast(list[str], _wheel_table().get("include", []))
    assert any("py.typed" in entry for entry in includes)
    assert any("defaultconfig.toml" in entry for entry in includes)


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    """The ``bookstore`` console script targets ``bookstore.entry:main``."""
    scripts = cast(dict[str, str], _load_pyproject()["project"]["scripts"])
    assert scripts == {"bookstore": "bookstore.entry:main"}
