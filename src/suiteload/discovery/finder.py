"""Glob-based discovery of candidate test files."""
from __future__ import annotations

import asyncio
import glob
import logging
from pathlib import Path
from typing import List, Union

from suiteload.core import DiscoveredFile

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.{py,apy}"


async def discover(pattern: str, base_dir: Union[str, Path]) -> List[DiscoveredFile]:
    """Return the files under ``base_dir`` matching ``pattern``, sorted by path."""

    base = Path(base_dir).expanduser().resolve()
    paths = await asyncio.to_thread(_expand, pattern, base)
    logger.debug("Pattern %r matched %d file(s) under %s", pattern, len(paths), base)
    return [DiscoveredFile.from_path(path) for path in paths]


def expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternatives (nesting allowed) into plain glob patterns."""

    start = pattern.find("{")
    if start == -1:
        return [pattern]
    depth = 0
    choices: List[str] = []
    piece_start = start + 1
    for index in range(start, len(pattern)):
        char = pattern[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                choices.append(pattern[piece_start:index])
                prefix, suffix = pattern[:start], pattern[index + 1 :]
                expanded: List[str] = []
                for choice in choices:
                    expanded.extend(expand_braces(prefix + choice + suffix))
                return expanded
        elif char == "," and depth == 1:
            choices.append(pattern[piece_start:index])
            piece_start = index + 1
    raise ValueError(f"Unbalanced braces in pattern '{pattern}'")


def _expand(pattern: str, base: Path) -> List[Path]:
    found = set()
    for variant in expand_braces(pattern):
        for match in glob.glob(variant, root_dir=base, recursive=True):
            path = (base / match).resolve()
            if path.is_file():
                found.add(path)
    return sorted(found)
