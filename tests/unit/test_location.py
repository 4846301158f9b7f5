"""Tests for expectkit.location module."""

import inspect
from pathlib import Path

from expectkit.context import TestContext
from expectkit.discovery import TestMethod
from expectkit.location import StackLocationResolver
from expectkit.results import ResultStore


THIS_FILE = Path(__file__).name


def make_context(fn, resolver) -> TestContext:
    test = TestMethod(method_name="test_body", name="body", fn=fn, is_async=False)
    return TestContext(unit_name="Unit", test=test, store=ResultStore(), resolver=resolver)


def unrelated():
    pass


class TestResolve:
    def test_prefers_test_method_frame(self):
        resolver = StackLocationResolver()
        seen = {}

        def helper():
            return resolver.resolve(ctx)

        def body():
            seen["line"] = inspect.currentframe().f_lineno + 1
            seen["location"] = helper()

        ctx = make_context(body, resolver)
        body()

        location = seen["location"]
        assert location.file == THIS_FILE
        assert location.test_name == "body"
        assert location.line == seen["line"]

    def test_falls_back_to_nearest_caller_outside_framework(self):
        resolver = StackLocationResolver()
        ctx = make_context(unrelated, resolver)

        line = inspect.currentframe().f_lineno + 1
        location = resolver.resolve(ctx)

        assert location.file == THIS_FILE
        assert location.line == line


class TestResolveException:
    def test_uses_deepest_test_method_entry(self):
        resolver = StackLocationResolver()
        seen = {}

        def explode():
            raise ValueError("deep")

        def body():
            seen["line"] = inspect.currentframe().f_lineno + 1
            explode()

        ctx = make_context(body, resolver)
        try:
            body()
        except ValueError as e:
            location = resolver.resolve_exception(ctx, e)

        assert location.line == seen["line"]
        assert location.test_name == "body"

    def test_falls_back_to_outermost_user_frame(self):
        resolver = StackLocationResolver()
        ctx = make_context(unrelated, resolver)

        try:
            line = inspect.currentframe().f_lineno + 1
            raise RuntimeError("here")
        except RuntimeError as e:
            location = resolver.resolve_exception(ctx, e)

        assert location.file == THIS_FILE
        assert location.line == line

    def test_no_traceback(self):
        resolver = StackLocationResolver()
        ctx = make_context(unrelated, resolver)
        assert resolver.resolve_exception(ctx, ValueError("never raised")) is None
