"""Shared helpers; declares no tests."""


def page_url(base: str, path: str) -> str:
    return base.rstrip("/") + "/" + path.lstrip("/")
