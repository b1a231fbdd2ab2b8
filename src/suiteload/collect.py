"""Discover, filter and load test files into a flat list of cases."""
from __future__ import annotations

import asyncio
import logging
from collections import Counter
from typing import Any, Dict, List, Mapping, Optional

from suiteload.config import LoaderConfig
from suiteload.core import DiscoveredFile, ModuleFormat, TestCase
from suiteload.discovery import discover, filter_candidates
from suiteload.loading import import_module
from suiteload.suite import build_suite

logger = logging.getLogger(__name__)

SUITE_EXPORT = "run_suite"
CASE_EXPORT = "run"
_CASE_FIELDS = {"name", "description", "run", "skip", SUITE_EXPORT}
_METADATA_TYPES = (str, int, float, bool, list, tuple, dict, set, frozenset, type(None))


async def load_tests(config: LoaderConfig, pattern: Optional[str] = None) -> List[TestCase]:
    """Return every test case declared by files under ``config.root_dir``.

    Files load concurrently; the first failure aborts the whole call.
    """

    candidates = await discover(pattern or config.pattern, config.root_dir)
    candidates = await filter_candidates(
        candidates,
        name_pattern=config.filter,
        body_pattern=config.filter_body,
    )
    per_file = await asyncio.gather(*(_load_file(item, config.module_type) for item in candidates))
    cases = [case for contribution in per_file for case in contribution]
    _ensure_unique(cases)
    logger.debug("Loaded %d case(s) from %d file(s)", len(cases), len(candidates))
    return cases


def load_tests_sync(config: LoaderConfig, pattern: Optional[str] = None) -> List[TestCase]:
    return asyncio.run(load_tests(config, pattern))


async def _load_file(item: DiscoveredFile, module_type: Optional[ModuleFormat]) -> List[TestCase]:
    export = await import_module(item.path, module_type)
    run_suite = _lookup(export, SUITE_EXPORT)
    if callable(run_suite):
        return await build_suite(item.path, item.name, run_suite)
    run = _lookup(export, CASE_EXPORT)
    if callable(run):
        return [_single_case(item, export, run)]
    logger.warning("No tests found in %s", item.path)
    return []


def _single_case(item: DiscoveredFile, export: Any, run: Any) -> TestCase:
    return TestCase(
        name=item.name,
        description=_lookup(export, "description") or "",
        run=run,
        path=item.path,
        skip=_lookup(export, "skip"),
        options=_metadata(export),
    )


def _lookup(export: Any, key: str) -> Any:
    if isinstance(export, Mapping):
        return export.get(key)
    return getattr(export, key, None)


def _metadata(export: Any) -> Dict[str, Any]:
    if isinstance(export, Mapping):
        return {key: value for key, value in export.items() if key not in _CASE_FIELDS}
    # Module namespaces also carry imports, so only plain data attributes count.
    return {
        key: value
        for key, value in getattr(export, "__dict__", {}).items()
        if not key.startswith("_")
        and key not in _CASE_FIELDS
        and key != "default"
        and isinstance(value, _METADATA_TYPES)
    }


def _ensure_unique(cases: List[TestCase]) -> None:
    counts = Counter(case.name for case in cases)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise ValueError(f"Duplicate test case names: {', '.join(duplicates)}")
