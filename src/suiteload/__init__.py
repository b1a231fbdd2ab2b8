"""suiteload package initialization."""
from __future__ import annotations

from .version import __version__
from .collect import load_tests, load_tests_sync
from .config import ConfigOptions, LoaderConfig, build_loader_config
from .core import DiscoveredFile, ModuleFormat, TestCase
from .loading import import_module
from .suite import SuiteBuilder, build_suite

__all__ = [
    "__version__",
    "ConfigOptions",
    "DiscoveredFile",
    "LoaderConfig",
    "ModuleFormat",
    "SuiteBuilder",
    "TestCase",
    "build_loader_config",
    "build_suite",
    "import_module",
    "load_tests",
    "load_tests_sync",
]
