"""Console reporter for expectkit results using Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.segment import Segments
from rich.text import Text

from expectkit.reports.base import Reporter
from expectkit.results import ResultKind


if TYPE_CHECKING:
    from expectkit.results import ResultRecord, ResultStore


_KIND_COLORS: dict[ResultKind, str] = {
    ResultKind.PASS: "green",
    ResultKind.FAIL: "red",
    ResultKind.XFAIL: "blue",
}


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def summary_line(counts: dict[ResultKind, int]) -> str:
    """``"<P> pass(es), <F> failure(s), <X> expected failure(s)"`` for one test."""
    return ", ".join(
        [
            _plural(counts[ResultKind.PASS], "pass", "passes"),
            _plural(counts[ResultKind.FAIL], "failure", "failures"),
            _plural(counts[ResultKind.XFAIL], "expected failure", "expected failures"),
        ]
    )


class ConsoleReporter(Reporter):
    """Reporter that prints a per-test summary to the console.

    Output layout:

        ArithmeticTests Results:
          add:
            1 pass, 0 failures, 0 expected failures
          sub:
            0 passes, 1 failure, 0 expected failures
            FAIL: should be zero (test_math.py, line 12)
    """

    def __init__(self, console: Console | None = None, *, color: bool = True) -> None:
        self.console = console or Console(highlight=False, no_color=not color)
        self.color = color

    def _print(self, markup: str) -> None:
        # Text.wrap expands tabs, so lines are written as pre-rendered segments.
        text = Text.from_markup(markup, emoji=False)
        self.console.print(Segments(text.render(self.console, end="\n")), soft_wrap=True)

    def _format_record(self, record: ResultRecord) -> str:
        label = str(record.kind)
        rest = escape(str(record)[len(label):])
        if not self.color:
            return escape(label) + rest
        color = _KIND_COLORS[record.kind]
        return f"[{color}]{label}[/{color}]{rest}"

    def render(self, unit_name: str, store: ResultStore, verbose: bool = False) -> None:
        self._print(f"{escape(unit_name)} Results:")
        for test_name, records in store.items():
            self._print(f"  {escape(test_name)}:")
            self._print(f"    {summary_line(store.counts(test_name))}")
            shown = records if verbose else [r for r in records if r.kind is ResultKind.FAIL]
            for record in shown:
                self._print(f"    {self._format_record(record)}")
