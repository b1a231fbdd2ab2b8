"""Core dataclasses shared across suiteload subsystems."""
from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

RunCallable = Callable[[Any], Union[Awaitable[None], None]]
SkipPredicate = Callable[[], Union[bool, Awaitable[bool]]]


class ModuleFormat(str, Enum):
    """Packaging format hint for a test file."""

    LEGACY = "legacy"
    MODERN = "modern"


@dataclass(frozen=True)
class DiscoveredFile:
    """A candidate test file found on disk."""

    path: Path
    name: str

    @classmethod
    def from_path(cls, path: Path) -> "DiscoveredFile":
        return cls(path=path, name=path.stem)


@dataclass(frozen=True)
class TestCase:
    """Executable test case descriptor handed to the runner."""

    __test__ = False  # not a pytest class

    name: str
    description: str
    run: RunCallable
    path: Path
    skip: Optional[SkipPredicate] = None
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    async def should_skip(self) -> bool:
        """Evaluate the skip predicate, awaiting it when it is asynchronous."""

        if self.skip is None:
            return False
        result = self.skip()
        if inspect.isawaitable(result):
            result = await result
        return bool(result)
