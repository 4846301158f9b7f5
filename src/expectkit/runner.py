"""Test runner for executing the tests of a test case."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from expectkit.config import ExpectkitSettings, get_settings
from expectkit.context import TestContext, test_context_scope
from expectkit.discovery import MethodDiscovery, PrefixMethodDiscovery, TestMethod
from expectkit.errors import EventLoopRunningError
from expectkit.expectations import failure_kind, type_name
from expectkit.location import LocationResolver, StackLocationResolver
from expectkit.reports import ConsoleReporter, Reporter
from expectkit.results import ResultRecord, ResultStore


if TYPE_CHECKING:
    from expectkit.case import TestCase


logger = logging.getLogger(__name__)


def _loop_is_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class Runner:
    """Discovers and runs the test methods of a test case, then reports.

    Each test method runs between the case's ``set_up`` and ``tear_down``
    hooks. An exception escaping a test method is recorded as a failure for
    that test and the run moves on. An exception from a hook is not: it
    propagates and ends the run.

    Examples:
        # Defaults from the environment
        store = Runner().run(MathTests())

        # Custom prefix, verbose report
        runner = Runner(settings=ExpectkitSettings(test_prefix="check_"))
        store = runner.run(MathTests(), verbose=True)
    """

    def __init__(
        self,
        reporter: Reporter | None = None,
        *,
        discovery: MethodDiscovery | None = None,
        location_resolver: LocationResolver | None = None,
        settings: ExpectkitSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.discovery = discovery or PrefixMethodDiscovery(self.settings.test_prefix)
        self.location_resolver = location_resolver or StackLocationResolver()
        self.reporter = reporter or ConsoleReporter(color=self.settings.color)

    def run(self, unit: TestCase, verbose: bool | None = None) -> ResultStore:
        """Run every test method of ``unit`` and render the report.

        Args:
            unit: Test case instance to run.
            verbose: Report every record instead of failures only. Defaults
                to the configured setting.

        Returns:
            The records produced by this run.
        """
        if verbose is None:
            verbose = self.settings.verbose

        store = ResultStore()
        unit_name = type(unit).__qualname__
        tests = self.discovery.discover(unit)
        if any(test.is_async for test in tests) and _loop_is_running():
            raise EventLoopRunningError(unit_name)
        for test in tests:
            self._run_test(unit, unit_name, test, store)

        self.reporter.render(unit_name, store, verbose)
        return store

    def _run_test(self, unit: TestCase, unit_name: str, test: TestMethod, store: ResultStore) -> None:
        ctx = TestContext(unit_name=unit_name, test=test, store=store, resolver=self.location_resolver)
        logger.debug("Running %s.%s", unit_name, test.method_name)
        with test_context_scope(ctx):
            self._call_hook(unit, "set_up", unit_name)
            try:
                self._invoke(test)
            except Exception as e:
                store.add(test.name, self._result_for_exception(ctx, e))
            finally:
                self._call_hook(unit, "tear_down", unit_name)
        logger.debug("Finished %s.%s", unit_name, test.method_name)

    def _call_hook(self, unit: TestCase, hook: str, unit_name: str) -> None:
        try:
            getattr(unit, hook)()
        except Exception:
            logger.error("%s.%s raised; aborting the run", unit_name, hook)
            raise

    def _invoke(self, test: TestMethod) -> None:
        if test.is_async:
            asyncio.run(test.fn())
        else:
            test.fn()

    def _result_for_exception(self, ctx: TestContext, e: Exception) -> ResultRecord:
        """Convert an exception escaping a test method into a failing record."""
        message = f"Unhandled {type_name(type(e))}"
        try:
            detail = str(e)
        except Exception:
            logger.debug("str() of %s raised", type(e).__name__, exc_info=True)
            detail = f"<unprintable {type(e).__name__}>"
        if detail:
            message += f": {detail}"
        logger.info("%s.%s: %s", ctx.unit_name, ctx.test.method_name, message)
        return ResultRecord(
            message=message,
            location=ctx.resolver.resolve_exception(ctx, e),
            kind=failure_kind(),
        )


def run(*units: TestCase, verbose: bool | None = None, runner: Runner | None = None) -> list[ResultStore]:
    """Run several test cases one after another (convenience wrapper).

    Args:
        units: Test case instances, run in the order given.
        verbose: Report every record instead of failures only.
        runner: Runner to use; a default one is built if omitted.

    Returns:
        One ResultStore per unit, in the same order.
    """
    runner = runner or Runner()
    return [runner.run(unit, verbose) for unit in units]
