from __future__ import annotations

import asyncio
import re
from pathlib import Path

import pytest

from suiteload.core import DiscoveredFile
from suiteload.discovery import DEFAULT_PATTERN, discover, expand_braces, filter_candidates


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"# {name}\n", encoding="utf-8")


def test_expand_braces() -> None:
    assert expand_braces("*.py") == ["*.py"]
    assert expand_braces("*.{py,apy}") == ["*.py", "*.apy"]
    assert expand_braces("{a,b{1,2}}.py") == ["a.py", "b1.py", "b2.py"]
    with pytest.raises(ValueError, match="Unbalanced"):
        expand_braces("*.{py,apy")


def test_discover_default_pattern(tmp_path: Path) -> None:
    _touch(tmp_path, "b_case.py", "a_case.apy", "notes.txt", "sub/deep.py")
    found = asyncio.run(discover(DEFAULT_PATTERN, tmp_path))
    assert [item.name for item in found] == ["a_case", "b_case"]
    assert all(item.path.is_absolute() for item in found)
    assert found[0].path == (tmp_path / "a_case.apy").resolve()


def test_discover_recursive_pattern(tmp_path: Path) -> None:
    _touch(tmp_path, "top.py", "sub/deep.py", "sub/dir.py/inner.py")
    found = asyncio.run(discover("**/*.py", tmp_path))
    assert sorted(item.name for item in found) == ["deep", "inner", "top"]


def test_discover_without_matches_is_empty(tmp_path: Path) -> None:
    assert asyncio.run(discover(DEFAULT_PATTERN, tmp_path)) == []


def _candidates(root: Path, *names: str):
    return [DiscoveredFile.from_path(root / name) for name in names]


def test_name_filter_is_unanchored(tmp_path: Path) -> None:
    candidates = _candidates(tmp_path, "login_form.py", "logout.py", "search.py")
    kept = asyncio.run(filter_candidates(candidates, name_pattern="log"))
    assert [item.name for item in kept] == ["login_form", "logout"]
    kept = asyncio.run(filter_candidates(candidates, name_pattern=re.compile("form$")))
    assert [item.name for item in kept] == ["login_form"]


def test_body_filter_reads_contents(tmp_path: Path) -> None:
    (tmp_path / "one.py").write_text("# special-marker\n", encoding="utf-8")
    (tmp_path / "two.py").write_text("# ordinary\n", encoding="utf-8")
    candidates = _candidates(tmp_path, "one.py", "two.py")
    kept = asyncio.run(filter_candidates(candidates, body_pattern="special-marker"))
    assert [item.name for item in kept] == ["one"]


def test_name_filter_applies_before_body_filter(tmp_path: Path) -> None:
    (tmp_path / "one.py").write_text("# special-marker\n", encoding="utf-8")
    candidates = _candidates(tmp_path, "one.py", "unreadable.py")
    kept = asyncio.run(filter_candidates(candidates, name_pattern="one", body_pattern="special"))
    assert [item.name for item in kept] == ["one"]


def test_body_filter_read_error_propagates(tmp_path: Path) -> None:
    (tmp_path / "one.py").write_text("# special-marker\n", encoding="utf-8")
    candidates = _candidates(tmp_path, "one.py", "missing.py")
    with pytest.raises(FileNotFoundError):
        asyncio.run(filter_candidates(candidates, body_pattern="special"))
