"""Core models exposed at the package level."""
from .models import DiscoveredFile, ModuleFormat, RunCallable, SkipPredicate, TestCase

__all__ = [
    "DiscoveredFile",
    "ModuleFormat",
    "RunCallable",
    "SkipPredicate",
    "TestCase",
]
