"""Name and content filters applied to discovered files."""
from __future__ import annotations

import asyncio
import logging
import re
from typing import List, Optional, Sequence, Union

from suiteload.core import DiscoveredFile

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern[str]]


async def filter_candidates(
    candidates: Sequence[DiscoveredFile],
    *,
    name_pattern: Optional[PatternLike] = None,
    body_pattern: Optional[PatternLike] = None,
) -> List[DiscoveredFile]:
    """Keep candidates whose name and file contents match the given regexes."""

    selected = list(candidates)
    if name_pattern:
        name_re = re.compile(name_pattern)
        selected = [item for item in selected if name_re.search(item.name)]
        logger.debug("Name filter %r kept %d file(s)", name_re.pattern, len(selected))
    if body_pattern:
        body_re = re.compile(body_pattern)
        matches = await asyncio.gather(*(_body_matches(item, body_re) for item in selected))
        selected = [item for item, matched in zip(selected, matches) if matched]
        logger.debug("Body filter %r kept %d file(s)", body_re.pattern, len(selected))
    return selected


async def _body_matches(item: DiscoveredFile, body_re: re.Pattern[str]) -> bool:
    contents = await asyncio.to_thread(item.path.read_text, encoding="utf-8")
    return body_re.search(contents) is not None
