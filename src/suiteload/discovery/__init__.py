"""Test file discovery and filtering."""
from .filters import filter_candidates
from .finder import DEFAULT_PATTERN, discover, expand_braces

__all__ = [
    "DEFAULT_PATTERN",
    "discover",
    "expand_braces",
    "filter_candidates",
]
