"""Base class for user-defined test cases."""

from __future__ import annotations

from typing import TYPE_CHECKING

from expectkit.expectations import Expectations


if TYPE_CHECKING:
    from expectkit.results import ResultStore
    from expectkit.runner import Runner


class TestCase(Expectations):
    """A group of tests declared as methods named ``test_*``.

    Running the case invokes each test method, which records expectations
    through the ``expect`` family of methods. A broken expectation is
    recorded as a failure, together with the file and line it came from, and
    the test carries on.

    Example:
        class ArithmeticTests(TestCase):
            def test_add(self):
                self.expect_equal(1 + 1, 2)

        ArithmeticTests().run_tests(verbose=True)
    """

    __test__ = False  # Prevent pytest from collecting this as a test class

    def set_up(self) -> None:
        """Runs before each test. Override to prepare state for a test."""

    def tear_down(self) -> None:
        """Runs after each test, even one that raised. Override to undo changes made by a test."""

    def run_tests(self, verbose: bool | None = None, *, runner: Runner | None = None) -> ResultStore:
        """Run all tests declared on this case and print the results.

        Tests run in declaration order; do not rely on it. A test method that
        raises is recorded as a failure.
        """
        from expectkit.runner import Runner  # noqa: PLC0415

        return (runner or Runner()).run(self, verbose)
