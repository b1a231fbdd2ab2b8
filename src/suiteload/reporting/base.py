"""Reporter interface definitions."""
from __future__ import annotations

from typing import Sequence

from suiteload.core import TestCase


class Reporter:
    """Interface for case listing renderers."""

    def report(self, cases: Sequence[TestCase]) -> None:  # pragma: no cover - interface
        raise NotImplementedError
