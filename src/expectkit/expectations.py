"""Expectation API used inside test methods.

Each expectation evaluates a condition and appends one ResultRecord for the
running test. Failed expectations are recorded, never raised, so a test keeps
going after a broken expectation and the run keeps going after a broken test.
"""

from __future__ import annotations

import builtins
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any, TypeVar, overload

from expectkit.context import TestContext, expected_failure_scope, get_test_context, in_expected_failure
from expectkit.errors import OutsideTestError
from expectkit.results import ResultKind, ResultRecord


T = TypeVar("T")


def type_name(error_type: type) -> str:
    """Display name of an exception type; builtins are left unqualified."""
    if error_type.__module__ == builtins.__name__:
        return error_type.__qualname__
    return f"{error_type.__module__}.{error_type.__qualname__}"


def failure_kind() -> ResultKind:
    """FAIL, or XFAIL while an expected-failure scope is active."""
    return ResultKind.XFAIL if in_expected_failure() else ResultKind.FAIL


def _equal(a: Any, b: Any) -> bool:
    # A value always equals itself, NaN included.
    return a is b or bool(a == b)


class Expectations:
    """Mixin providing the ``expect`` family of operations."""

    def _require_context(self, operation: str) -> TestContext:
        ctx = get_test_context()
        if ctx is None:
            raise OutsideTestError(operation)
        return ctx

    def _record(self, ctx: TestContext, kind: ResultKind, message: str | None) -> ResultRecord:
        record = ResultRecord(message=message, location=ctx.resolver.resolve(ctx), kind=kind)
        ctx.store.add(ctx.test_name, record)
        return record

    def expect(self, condition: Any, message: str | None = "expect") -> ResultRecord:
        """Record a pass if ``condition`` is truthy, a failure otherwise."""
        ctx = self._require_context("expect")
        kind = ResultKind.PASS if condition else failure_kind()
        return self._record(ctx, kind, message)

    def fail(self, message: str) -> ResultRecord:
        """Record an unconditional failure."""
        ctx = self._require_context("fail")
        return self._record(ctx, failure_kind(), message)

    def expect_equal(self, a: T, b: T, message: str | None = None) -> ResultRecord:
        if message is None:
            message = f"expect {a} == {b}"
        return self.expect(_equal(a, b), message)

    def expect_not_equal(self, a: T, b: T, message: str | None = None) -> ResultRecord:
        if message is None:
            message = f"expect {a} != {b}"
        return self.expect(not _equal(a, b), message)

    def expect_less_than(self, a: Any, b: Any, message: str | None = None) -> ResultRecord:
        if message is None:
            message = f"expect {a} < {b}"
        return self.expect(a < b, message)

    def expect_less_than_or_equal(self, a: Any, b: Any, message: str | None = None) -> ResultRecord:
        if message is None:
            message = f"expect {a} <= {b}"
        return self.expect(a <= b, message)

    def expect_greater_than(self, a: Any, b: Any, message: str | None = None) -> ResultRecord:
        if message is None:
            message = f"expect {a} > {b}"
        return self.expect(a > b, message)

    def expect_greater_than_or_equal(self, a: Any, b: Any, message: str | None = None) -> ResultRecord:
        if message is None:
            message = f"expect {a} >= {b}"
        return self.expect(a >= b, message)

    def expect_throws(
        self,
        error_type: type[BaseException],
        block: Callable[[], Any],
        message: str | None = None,
    ) -> BaseException | None:
        """Expect ``block`` to raise exactly ``error_type``.

        Subclasses of ``error_type`` do not count. Whatever the block raises,
        ``SystemExit`` included, is captured and returned; it never escapes
        into the test. ``KeyboardInterrupt`` propagates unless it is the
        expected type.

        Returns
        -------
        BaseException | None
            The exception raised by ``block``, or None if it returned normally.
        """
        if message is None:
            message = f"expect throws {type_name(error_type)}"
        try:
            block()
        except BaseException as exc:
            if isinstance(exc, KeyboardInterrupt) and error_type is not KeyboardInterrupt:
                raise
            self.expect(type(exc) is error_type, message)
            return exc
        self.fail(message)
        return None

    @overload
    def expect_failure(self, block: None = None) -> AbstractContextManager[None]: ...

    @overload
    def expect_failure(self, block: Callable[[], T]) -> T: ...

    def expect_failure(self, block: Callable[[], T] | None = None) -> T | AbstractContextManager[None]:
        """Record failures made by ``block`` as expected failures.

        Without a block, returns a context manager with the same effect:

            with self.expect_failure():
                self.expect_equal(broken_sum(1, 1), 2)

        Expected-failure mode ends when the block returns or raises. An
        exception escaping the block propagates to the runner, which records
        it as an ordinary failure.
        """
        if block is None:
            return expected_failure_scope()
        with expected_failure_scope():
            return block()
