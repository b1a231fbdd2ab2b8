"""Declarative ``test``/``describe`` registration for suite files.

A suite file exports ``run_suite(test, describe)``. Calling it against a
:class:`SuiteBuilder` records every case in one of two accumulators; if any
case landed in the ``only`` accumulator, that accumulator replaces the file's
whole contribution.
"""
from __future__ import annotations

import inspect
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional

from suiteload.core import RunCallable, TestCase

GROUP_SEPARATOR = ">"

GroupCallback = Callable[[], None]


def _always_skip() -> bool:
    return True


class TestApi:
    """The ``test`` object handed to suite callbacks."""

    __test__ = False

    def __init__(self, builder: "SuiteBuilder") -> None:
        self._builder = builder

    def __call__(
        self,
        description: str,
        run: RunCallable,
        options: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> None:
        self._builder.add_case(description, run, {**(options or {}), **extra})

    def only(
        self,
        description: str,
        run: RunCallable,
        options: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> None:
        self._builder.add_case(description, run, {**(options or {}), **extra}, only=True)

    def skip(
        self,
        description: str,
        run: RunCallable,
        options: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> None:
        self._builder.add_case(description, run, {**(options or {}), **extra}, skip=True)


class DescribeApi:
    """The ``describe`` object handed to suite callbacks."""

    def __init__(self, builder: "SuiteBuilder") -> None:
        self._builder = builder

    def __call__(self, description: str, callback: GroupCallback) -> None:
        self._builder.add_group(description, callback)

    def only(self, description: str, callback: GroupCallback) -> None:
        self._builder.add_group(description, callback, only=True)

    def skip(self, description: str, callback: GroupCallback) -> None:
        self._builder.add_group(description, callback, skip=True)


class SuiteBuilder:
    """Collects the cases declared by one file's registration pass."""

    def __init__(self, path: Path, root_name: str) -> None:
        self._path = path
        self._groups: List[str] = [root_name]
        self._counter = 0
        self._general: List[TestCase] = []
        self._only: List[TestCase] = []
        self._only_in_scope = False
        self._skip_in_scope = False
        self.test = TestApi(self)
        self.describe = DescribeApi(self)

    def add_case(
        self,
        description: str,
        run: RunCallable,
        options: Mapping[str, Any],
        *,
        only: bool = False,
        skip: bool = False,
    ) -> TestCase:
        extra = dict(options)
        requested_skip = extra.pop("skip", None)
        if skip or self._skip_in_scope:
            predicate = _always_skip
        else:
            predicate = requested_skip
        case = TestCase(
            name=f"{GROUP_SEPARATOR.join(self._groups)}_{self._counter}",
            description=description,
            run=run,
            path=self._path,
            skip=predicate,
            options=extra,
        )
        self._counter += 1
        target = self._only if (only or self._only_in_scope) else self._general
        target.append(case)
        return case

    def add_group(
        self,
        description: str,
        callback: GroupCallback,
        *,
        only: bool = False,
        skip: bool = False,
    ) -> None:
        previous_only = self._only_in_scope
        previous_skip = self._skip_in_scope
        self._only_in_scope = previous_only or only
        self._skip_in_scope = previous_skip or skip
        self._groups.append(description)
        try:
            result = callback()
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(f"describe('{description}') callback must be synchronous")
        finally:
            self._groups.pop()
            self._only_in_scope = previous_only
            self._skip_in_scope = previous_skip

    def cases(self) -> List[TestCase]:
        """Resolve the registration pass into the file's contribution."""

        return list(self._only) if self._only else list(self._general)


async def build_suite(path: Path, root_name: str, callback: Callable[..., Any]) -> List[TestCase]:
    """Run ``callback(test, describe)`` for one file and return its cases."""

    builder = SuiteBuilder(path, root_name)
    result = callback(builder.test, builder.describe)
    if inspect.isawaitable(result):
        await result
    return builder.cases()
