"""Loader configuration."""
from .loader import build_loader_config
from .models import ConfigOptions, LoaderConfig

__all__ = [
    "ConfigOptions",
    "LoaderConfig",
    "build_loader_config",
]
