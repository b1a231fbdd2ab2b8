"""Suite construction DSL."""
from .builder import GROUP_SEPARATOR, DescribeApi, SuiteBuilder, TestApi, build_suite

__all__ = [
    "GROUP_SEPARATOR",
    "DescribeApi",
    "SuiteBuilder",
    "TestApi",
    "build_suite",
]
