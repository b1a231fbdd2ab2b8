"""Dynamic loading of test modules in either packaging format.

Legacy modules are imported synchronously through :mod:`importlib` and cached
in ``sys.modules``. Modern modules are addressed by ``file://`` URL, read off
the event loop and compiled with top-level ``await`` allowed, so their body
runs as a coroutine on the caller's loop.
"""
from __future__ import annotations

import ast
import asyncio
import builtins
import importlib
import importlib.machinery
import importlib.util
import inspect
import logging
import os
import sys
import types
from pathlib import Path
from typing import Any, Awaitable, Union
from urllib.parse import urlsplit
from urllib.request import url2pathname

from suiteload.core import ModuleFormat

logger = logging.getLogger(__name__)

MODERN_SUFFIXES = (".apy",)
SOURCE_SUFFIXES = (".py",) + MODERN_SUFFIXES
MODERN_BUILD_ENV = "SUITELOAD_MODERN_BUILD"

Target = Union[str, "os.PathLike[str]"]


def import_module(target: Target, module_format: ModuleFormat | str | None) -> Awaitable[Any]:
    """Return an awaitable resolving to the module (or its ``default`` export) at ``target``.

    ``module_format`` is mandatory and validated before anything is awaited, so
    a missing hint fails at the call site.
    """

    fmt = _require_format(module_format)
    return _import(target, fmt)


def uses_modern_loader(target: Target, module_format: ModuleFormat) -> bool:
    """Decide which mechanism loads ``target``."""

    if modern_build_enabled() or module_format is ModuleFormat.MODERN:
        return True
    return _is_path_like(target) and Path(target).suffix in MODERN_SUFFIXES


def modern_build_enabled() -> bool:
    return os.environ.get(MODERN_BUILD_ENV, "").strip().lower() in {"1", "true", "yes", "on"}


def to_specifier(target: Target) -> str:
    """Convert a filesystem path to a ``file://`` URL; bare module names pass through."""

    if not _is_path_like(target):
        return str(target)
    return Path(target).expanduser().resolve().as_uri()


def unwrap_default(module: Any) -> Any:
    default = getattr(module, "default", None)
    return default if default else module


async def _import(target: Target, fmt: ModuleFormat) -> Any:
    if uses_modern_loader(target, fmt):
        specifier = to_specifier(target)
        logger.debug("Loading %s with the modern loader", specifier)
        module = await _import_modern(specifier)
    else:
        logger.debug("Loading %s with the legacy loader", target)
        module = _import_legacy(target)
    return unwrap_default(module)


def _require_format(module_format: ModuleFormat | str | None) -> ModuleFormat:
    if module_format is None:
        raise ValueError("A module format hint ('legacy' or 'modern') is required")
    try:
        return ModuleFormat(module_format)
    except ValueError as exc:
        raise ValueError(f"Unknown module format '{module_format}'") from exc


def _is_path_like(target: Target) -> bool:
    if isinstance(target, os.PathLike):
        return True
    text = str(target)
    if os.path.isabs(text) or os.sep in text or "/" in text:
        return True
    return text.endswith(SOURCE_SUFFIXES)


def _import_legacy(target: Target) -> types.ModuleType:
    if not _is_path_like(target):
        return importlib.import_module(str(target))
    path = Path(target).expanduser().resolve()
    module_name = f"suiteload_legacy_{path.stem}_{abs(hash(str(path))):x}"
    cached = sys.modules.get(module_name)
    if cached is not None:
        return cached
    if not path.exists():
        raise FileNotFoundError(f"Test module not found: {path}")
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to load module from {path}")
    _ensure_importable(path.parent)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


async def _import_modern(specifier: str) -> types.ModuleType:
    parts = urlsplit(specifier)
    if parts.scheme != "file":
        return await asyncio.to_thread(importlib.import_module, specifier)
    path = Path(url2pathname(parts.path))
    if not path.exists():
        raise FileNotFoundError(f"Test module not found: {path}")
    source = await asyncio.to_thread(path.read_bytes)
    code = compile(source, str(path), "exec", flags=ast.PyCF_ALLOW_TOP_LEVEL_AWAIT, dont_inherit=True)
    module_name = f"suiteload_modern_{path.stem}_{abs(hash(specifier)):x}"
    module = types.ModuleType(module_name)
    module.__file__ = str(path)
    module.__builtins__ = builtins  # type: ignore[attr-defined]
    module.__spec__ = importlib.machinery.ModuleSpec(module_name, None, origin=str(path))
    _ensure_importable(path.parent)
    sys.modules[module_name] = module
    try:
        # Module code runs as a function body; with top-level await it returns a coroutine.
        result = types.FunctionType(code, module.__dict__)()
        if inspect.iscoroutine(result):
            await result
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


def _ensure_importable(directory: Path) -> None:
    """Let a test file import helper modules that sit next to it."""

    entry = str(directory)
    if entry not in sys.path:
        sys.path.insert(0, entry)
