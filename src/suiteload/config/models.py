"""Configuration dataclasses for test loading."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from suiteload.core import ModuleFormat
from suiteload.discovery import DEFAULT_PATTERN


@dataclass(frozen=True)
class LoaderConfig:
    """Settings read by :func:`suiteload.collect.load_tests`."""

    root_dir: Path
    pattern: str = DEFAULT_PATTERN
    filter: Optional[str] = None
    filter_body: Optional[str] = None
    module_type: Optional[ModuleFormat] = None


@dataclass
class ConfigOptions:
    """Overrides supplied on the command line."""

    config_path: Optional[str] = None
    root_dir: Optional[str] = None
    pattern: Optional[str] = None
    filter: Optional[str] = None
    filter_body: Optional[str] = None
    module_type: Optional[str] = None
