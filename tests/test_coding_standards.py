"""
Tests that enforce coding standards.

These tests verify that the codebase follows our import conventions and
never uses a bare ``except:``.
"""

import pathlib as _pathlib
import re as _re

import pytest as _pytest

# Directories to check
SRC_DIR = _pathlib.Path(__file__).parent.parent / "src" / "dynadict"
TESTS_DIR = _pathlib.Path(__file__).parent

_BARE_EXCEPT = _re.compile(r"^\s*except\s*:")


def _python_files() -> list[_pathlib.Path]:
    """All Python files under src/dynadict and tests, this file excluded."""
    files = list(SRC_DIR.rglob("*.py")) + list(TESTS_DIR.rglob("*.py"))
    return sorted(path for path in files if path.name != "test_coding_standards.py")


def _extract_imports(content: str) -> list[tuple[int, str]]:
    """
    Extract 'from X import Y' statements from file content.

    Returns list of (line_number, line_content) tuples.
    Excludes:
    - 'from __future__ import' (allowed)
    - Lines inside TYPE_CHECKING blocks (allowed)
    """
    imports: list[tuple[int, str]] = []
    in_type_checking = False

    for i, line in enumerate(content.split("\n"), start=1):
        stripped = line.strip()

        if "if TYPE_CHECKING:" in line or "if _typing.TYPE_CHECKING:" in line:
            in_type_checking = True
            continue

        # Any unindented statement ends the TYPE_CHECKING block
        if in_type_checking and stripped and not stripped.startswith("#") and line[0] not in " \t":
            in_type_checking = False

        if in_type_checking:
            continue

        if stripped.startswith("from ") and " import " in stripped:
            if "from __future__ import" in stripped:
                continue
            imports.append((i, stripped))

    return imports


def _relative(path: _pathlib.Path) -> str:
    return str(path.relative_to(TESTS_DIR.parent))


@_pytest.mark.parametrize("path", _python_files(), ids=_relative)
def test_no_from_imports(path: _pathlib.Path) -> None:
    """Modules use 'import X as _x' (external) or 'import X as x' (internal).

    __init__.py files may use 'from X import Y' to re-export.
    """
    if path.name == "__init__.py":
        return

    violations = _extract_imports(path.read_text())

    assert not violations, "\n".join(f"{path}:{num}: {line}" for num, line in violations)


@_pytest.mark.parametrize("path", _python_files(), ids=_relative)
def test_no_bare_except(path: _pathlib.Path) -> None:
    """Handlers name the exceptions they catch."""
    offenders = [
        num
        for num, line in enumerate(path.read_text().split("\n"), start=1)
        if _BARE_EXCEPT.match(line)
    ]

    assert not offenders, f"{path}: bare except on lines {offenders}"


class TestImportExtraction:
    """Tests for the import extraction logic itself."""

    def test_detects_from_import(self) -> None:
        """Should detect basic from imports."""
        imports = _extract_imports("from pathlib import Path")

        assert imports == [(1, "from pathlib import Path")]

    def test_allows_future_imports(self) -> None:
        """Should allow __future__ imports."""
        assert _extract_imports("from __future__ import annotations") == []

    def test_ignores_type_checking_block(self) -> None:
        """Imports inside a TYPE_CHECKING block are allowed."""
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from dynadict.dictionaries import DynamicDictionary

def foo():
    pass
"""
        assert _extract_imports(content) == []

    def test_detects_import_after_type_checking(self) -> None:
        """Imports after the TYPE_CHECKING block are checked again."""
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from allowed import Type

from forbidden import Other
"""
        imports = _extract_imports(content)

        assert len(imports) == 1
        assert "from forbidden import Other" in imports[0][1]


class TestBareExceptPattern:
    """Tests for the bare-except detector."""

    def test_matches_bare_except(self) -> None:
        assert _BARE_EXCEPT.match("    except:")

    def test_ignores_named_except(self) -> None:
        assert not _BARE_EXCEPT.match("    except KeyError:")
        assert not _BARE_EXCEPT.match("    except (KeyError, TypeError) as e:")
