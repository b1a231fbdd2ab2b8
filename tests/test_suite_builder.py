from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from suiteload.suite import SuiteBuilder, build_suite

FILE = Path("/suites/file1.py")


async def _noop(config) -> None:
    return None


def _build(callback, root: str = "file1"):
    return asyncio.run(build_suite(FILE, root, callback))


def _names(cases):
    return [case.name for case in cases]


def test_plain_tests_numbered_in_registration_order() -> None:
    def suite(test, describe):
        for label in ("a", "b", "c"):
            test(label, _noop)

    cases = _build(suite)
    assert _names(cases) == ["file1_0", "file1_1", "file1_2"]
    assert [case.description for case in cases] == ["a", "b", "c"]
    assert all(case.path == FILE for case in cases)


def test_group_prefix_and_shared_counter() -> None:
    def suite(test, describe):
        test("a", _noop)
        describe("g", lambda: test("b", _noop))

    assert _names(_build(suite)) == ["file1_0", "file1>g_1"]


def test_single_only_case_replaces_file_contribution() -> None:
    def suite(test, describe):
        test("a", _noop)
        describe("g", lambda: test.only("b", _noop))

    cases = _build(suite)
    assert _names(cases) == ["file1>g_1"]
    assert cases[0].description == "b"


def test_only_group_routes_nested_cases() -> None:
    def suite(test, describe):
        test("outside", _noop)

        def focused():
            test("inside one", _noop)
            describe("deeper", lambda: test("inside two", _noop))

        describe.only("focused", focused)
        test("after", _noop)

    assert _names(_build(suite)) == ["file1>focused_1", "file1>focused>deeper_2"]


def test_nested_only_group_restores_outer_scope() -> None:
    def suite(test, describe):
        def outer():
            describe.only("inner", lambda: test("x", _noop))
            test("still focused", _noop)

        describe.only("outer", outer)
        test("unfocused", _noop)

    assert _names(_build(suite)) == ["file1>outer>inner_0", "file1>outer_1"]


def test_sibling_groups_do_not_leak_names() -> None:
    def suite(test, describe):
        describe("first", lambda: test("a", _noop))
        describe.skip("second", lambda: test("b", _noop))
        describe("third", lambda: test("c", _noop))
        test("root", _noop)

    assert _names(_build(suite)) == ["file1>first_0", "file1>second_1", "file1>third_2", "file1_3"]


def test_skip_group_overrides_case_skip_option() -> None:
    def suite(test, describe):
        describe.skip("skipped", lambda: test("a", _noop, skip=lambda: False))
        test("free", _noop, skip=lambda: False)
        test("plain", _noop)

    skipped, free, plain = _build(suite)
    assert asyncio.run(skipped.should_skip()) is True
    assert asyncio.run(free.should_skip()) is False
    assert plain.skip is None
    assert asyncio.run(plain.should_skip()) is False


def test_skip_flag_restored_after_group() -> None:
    def suite(test, describe):
        def skipped():
            describe("nested", lambda: test("a", _noop))

        describe.skip("skipped", skipped)
        test("after", _noop)

    inside, after = _build(suite)
    assert asyncio.run(inside.should_skip()) is True
    assert after.skip is None


def test_explicit_skip_case_cannot_be_unskipped() -> None:
    def suite(test, describe):
        test.skip("forced", _noop, {"skip": lambda: False})

    (case,) = _build(suite)
    assert asyncio.run(case.should_skip()) is True
    assert "skip" not in case.options


def test_async_skip_predicate_is_awaited() -> None:
    async def later() -> bool:
        return True

    def suite(test, describe):
        test("deferred", _noop, skip=later)

    (case,) = _build(suite)
    assert asyncio.run(case.should_skip()) is True


def test_options_pass_through_and_are_read_only() -> None:
    def suite(test, describe):
        test("with options", _noop, {"expected_to_fail": "issue 12"}, resources=["browser"])

    (case,) = _build(suite)
    assert dict(case.options) == {"expected_to_fail": "issue 12", "resources": ["browser"]}
    with pytest.raises(TypeError):
        case.options["new"] = 1  # type: ignore[index]


def test_async_group_callback_rejected_and_stack_restored() -> None:
    builder = SuiteBuilder(FILE, "file1")

    async def group() -> None:
        builder.test("never", _noop)

    with pytest.raises(TypeError, match="must be synchronous"):
        builder.describe("async group", group)
    builder.test("after", _noop)
    assert _names(builder.cases()) == ["file1_0"]


def test_async_suite_callback_is_awaited() -> None:
    async def suite(test, describe):
        await asyncio.sleep(0)
        test("a", _noop)

    assert _names(_build(suite)) == ["file1_0"]


def test_registration_is_deterministic() -> None:
    def suite(test, describe):
        test("a", _noop)
        describe("g", lambda: test.only("b", _noop))

    first, second = _build(suite), _build(suite)
    assert [(c.name, c.description) for c in first] == [(c.name, c.description) for c in second]
