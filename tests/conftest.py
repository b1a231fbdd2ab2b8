from __future__ import annotations

import sys
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from suiteload.loading import MODERN_BUILD_ENV


@pytest.fixture(autouse=True)
def clear_modern_build_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a build flag exported by the developer's shell out of the tests."""

    monkeypatch.delenv(MODERN_BUILD_ENV, raising=False)


@pytest.fixture(autouse=True)
def restore_sys_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading test files adds their directories to the import path."""

    monkeypatch.setattr(sys, "path", list(sys.path))


@pytest.fixture
def write_module(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
