"""Nested groups declared through run_suite."""
from helpers import page_url


async def _noop(config) -> None:
    return None


def run_suite(test, describe):
    test("top-level case", _noop)

    def outer():
        test("first in outer", _noop)

        def inner():
            test("first in inner", _noop)
            test("second in inner", _noop)

        describe("inner", inner)
        test("after inner", _noop)

    describe("outer", outer)

    def sibling():
        test("opens " + page_url("http://localhost:8080/", "/login"), _noop)

    describe("sibling", sibling)
