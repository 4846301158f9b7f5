"""Framework errors, kept distinct from recorded test failures."""


class ExpectkitError(Exception):
    """Base class for errors raised by the framework itself."""


class OutsideTestError(ExpectkitError):
    """An expectation was evaluated with no test running."""

    def __init__(self, operation: str = "expect") -> None:
        self.operation = operation
        super().__init__(f"{operation}() called outside of a running test; use TestCase.run_tests()")


class EventLoopRunningError(ExpectkitError):
    """Coroutine tests were asked to run from inside a running event loop."""

    def __init__(self, unit_name: str) -> None:
        self.unit_name = unit_name
        super().__init__(
            f"{unit_name} has coroutine tests and an event loop is already running; "
            "call run_tests() from synchronous code"
        )
