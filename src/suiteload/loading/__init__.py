"""Module loading helpers."""
from .importing import (
    MODERN_BUILD_ENV,
    MODERN_SUFFIXES,
    import_module,
    modern_build_enabled,
    to_specifier,
    unwrap_default,
    uses_modern_loader,
)

__all__ = [
    "MODERN_BUILD_ENV",
    "MODERN_SUFFIXES",
    "import_module",
    "modern_build_enabled",
    "to_specifier",
    "unwrap_default",
    "uses_modern_loader",
]
