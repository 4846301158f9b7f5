"""Tests for expectkit.reports.console module."""

import io

import pytest
from rich.console import Console

from expectkit.reports.console import ConsoleReporter, summary_line
from expectkit.results import ResultKind, ResultRecord, ResultStore, SourceLocation


def record(kind: ResultKind, message: str | None = None, line: int | None = None) -> ResultRecord:
    location = SourceLocation(file="test_math.py", test_name="t", line=line) if line else None
    return ResultRecord(message=message, location=location, kind=kind)


def render(store: ResultStore, verbose: bool = False, unit_name: str = "MathTests", color: bool = False) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=80, force_terminal=False)
    ConsoleReporter(console=console, color=color).render(unit_name, store, verbose)
    return buffer.getvalue()


@pytest.fixture
def store() -> ResultStore:
    store = ResultStore()
    store.add("add", record(ResultKind.PASS, "expect 2 == 2", 4))
    store.add("sub", record(ResultKind.PASS, "expect 0 == 0", 7))
    store.add("sub", record(ResultKind.FAIL, "should be zero", 8))
    store.add("sub", record(ResultKind.XFAIL, "known bug", 9))
    return store


class TestSummaryLine:
    @pytest.mark.parametrize(
        "passes,failures,xfails,expected",
        [
            (0, 0, 0, "0 passes, 0 failures, 0 expected failures"),
            (1, 1, 1, "1 pass, 1 failure, 1 expected failure"),
            (2, 3, 4, "2 passes, 3 failures, 4 expected failures"),
            (1, 0, 2, "1 pass, 0 failures, 2 expected failures"),
        ],
    )
    def test_pluralization(self, passes, failures, xfails, expected):
        counts = {ResultKind.PASS: passes, ResultKind.FAIL: failures, ResultKind.XFAIL: xfails}
        assert summary_line(counts) == expected


class TestConsoleReporter:
    def test_failures_only_by_default(self, store):
        assert render(store) == (
            "MathTests Results:\n"
            "  add:\n"
            "    1 pass, 0 failures, 0 expected failures\n"
            "  sub:\n"
            "    1 pass, 1 failure, 1 expected failure\n"
            "    FAIL: should be zero (test_math.py, line 8)\n"
        )

    def test_verbose_prints_every_record_in_order(self, store):
        assert render(store, verbose=True) == (
            "MathTests Results:\n"
            "  add:\n"
            "    1 pass, 0 failures, 0 expected failures\n"
            "    PASS: expect 2 == 2 (test_math.py, line 4)\n"
            "  sub:\n"
            "    1 pass, 1 failure, 1 expected failure\n"
            "    PASS: expect 0 == 0 (test_math.py, line 7)\n"
            "    FAIL: should be zero (test_math.py, line 8)\n"
            "    XFAIL: known bug (test_math.py, line 9)\n"
        )

    def test_empty_store_prints_header_only(self):
        assert render(ResultStore()) == "MathTests Results:\n"

    def test_records_without_message_or_location(self):
        store = ResultStore()
        store.add("bare", record(ResultKind.FAIL))
        assert render(store).splitlines()[-1] == "    FAIL"

    def test_markup_in_messages_is_not_interpreted(self):
        store = ResultStore()
        store.add("brackets", record(ResultKind.FAIL, "expect [bold]x[/bold] == [1, 2]"))
        assert render(store).splitlines()[-1] == "    FAIL: expect [bold]x[/bold] == [1, 2]"

    def test_record_line_is_the_record_text(self):
        store = ResultStore()
        failure = record(ResultKind.FAIL, "a\tb [bold]x[/bold]", 3)
        store.add("tabs", failure)
        assert render(store).splitlines()[-1] == f"    {failure}"
        assert render(store, color=True).splitlines()[-1] == "    FAIL: a\tb [bold]x[/bold] (test_math.py, line 3)"

    def test_long_lines_are_not_wrapped(self):
        store = ResultStore()
        message = "x" * 200
        store.add("long", record(ResultKind.FAIL, message))
        assert render(store).splitlines()[-1] == f"    FAIL: {message}"

    def test_color_does_not_change_text(self, store):
        assert render(store, color=True) == render(store, color=False)

    def test_color_markup_on_terminal(self, store):
        buffer = io.StringIO()
        console = Console(file=buffer, width=80, force_terminal=True, color_system="standard")
        ConsoleReporter(console=console, color=True).render("MathTests", store, verbose=False)
        assert "\x1b[" in buffer.getvalue()
        assert "should be zero" in buffer.getvalue()
