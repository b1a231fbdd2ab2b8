"""Terminal reporter listing loaded cases."""
from __future__ import annotations

from typing import Sequence

import click
from colorama import init as colorama_init

from suiteload.core import TestCase

from .base import Reporter


class TerminalReporter(Reporter):
    """Human-readable listing that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        if use_color:
            colorama_init()

    def report(self, cases: Sequence[TestCase]) -> None:
        width = max((len(case.name) for case in cases), default=0)
        for case in cases:
            line = f"{case.name.ljust(width)}  {case.description}".rstrip()
            if case.skip is not None:
                line += " " + self._styled("[skip?]", "yellow")
            click.echo(line)
        files = len({case.path for case in cases})
        click.echo(self._styled(f"Found {len(cases)} case(s) in {files} file(s)", "cyan"))

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return click.style(text, fg=color)
