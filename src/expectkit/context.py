from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from expectkit.discovery import TestMethod
    from expectkit.location import LocationResolver
    from expectkit.results import ResultStore


@dataclass(frozen=True, slots=True)
class TestContext:
    """Execution context for the test method currently running.

    Attributes
    ----------
    unit_name : str
        Qualified name of the test case class.
    test : TestMethod
        The discovered test method being executed.
    store : ResultStore
        Store receiving records for this run.
    resolver : LocationResolver
        Resolves call sites for records of this test.
    """

    __test__ = False  # Prevent pytest from collecting this as a test class

    unit_name: str
    test: TestMethod
    store: ResultStore
    resolver: LocationResolver

    @property
    def test_name(self) -> str:
        return self.test.name


TEST_CONTEXT: ContextVar[TestContext | None] = ContextVar("test_context", default=None)
EXPECTED_FAILURE: ContextVar[bool] = ContextVar("expected_failure", default=False)


def get_test_context() -> TestContext | None:
    """Get the current test context, or None if not in a test."""
    return TEST_CONTEXT.get()


def in_expected_failure() -> bool:
    return EXPECTED_FAILURE.get()


@contextmanager
def test_context_scope(ctx: TestContext) -> Iterator[None]:
    """Temporarily set `TEST_CONTEXT` for the duration of the ``with`` block.

    Parameters
    ----------
    ctx : TestContext
        The context to bind as the current test context.
    """
    token = TEST_CONTEXT.set(ctx)
    try:
        yield
    finally:
        TEST_CONTEXT.reset(token)


@contextmanager
def expected_failure_scope() -> Iterator[None]:
    """Classify failures inside the ``with`` block as expected.

    The previous mode is restored on exit, including when the block raises.
    """
    token = EXPECTED_FAILURE.set(True)
    try:
        yield
    finally:
        EXPECTED_FAILURE.reset(token)
