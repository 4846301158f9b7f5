"""Result records and the per-run result store."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ResultKind(Enum):
    """Terminal classification of one expectation evaluation."""

    PASS = "PASS"
    FAIL = "FAIL"
    XFAIL = "XFAIL"

    def __str__(self) -> str:
        return self.value


class SourceLocation(BaseModel):
    """Where an expectation was evaluated.

    Attributes
    ----------
    file : str
        Base name of the source file containing the call site.
    test_name : str
        Human-readable name of the test the record belongs to.
    line : int
        Line number of the call site.
    """

    model_config = ConfigDict(frozen=True)

    file: str
    test_name: str
    line: int


class ResultRecord(BaseModel):
    """Outcome of a single expectation or unhandled exception.

    Attributes
    ----------
    message : str | None
        Description of the expectation, or of the unhandled exception.
    location : SourceLocation | None
        Call site, when one could be resolved.
    kind : ResultKind
        PASS, FAIL or XFAIL.
    """

    model_config = ConfigDict(frozen=True)

    message: str | None = None
    location: SourceLocation | None = None
    kind: ResultKind

    @property
    def passed(self) -> bool:
        return self.kind is ResultKind.PASS

    @property
    def failed(self) -> bool:
        return self.kind is ResultKind.FAIL

    @property
    def expected_failure(self) -> bool:
        return self.kind is ResultKind.XFAIL

    def __str__(self) -> str:
        text = str(self.kind)
        if self.message is not None:
            text += f": {self.message}"
        if self.location is not None:
            text += f" ({self.location.file}, line {self.location.line})"
        return text


class ResultStore:
    """Ordered mapping of test name to the records produced for that test.

    Test names keep the order in which they first received a record and each
    test's records keep insertion order. The store only grows during a run.
    """

    def __init__(self) -> None:
        self._results: dict[str, list[ResultRecord]] = {}

    def add(self, test_name: str, record: ResultRecord) -> None:
        """Append ``record`` to the sequence for ``test_name``."""
        self._results.setdefault(test_name, []).append(record)

    def get(self, test_name: str) -> list[ResultRecord]:
        """Records for ``test_name``, or an empty list if it recorded nothing."""
        return list(self._results.get(test_name, []))

    def __getitem__(self, test_name: str) -> list[ResultRecord]:
        return list(self._results[test_name])

    def __contains__(self, test_name: object) -> bool:
        return test_name in self._results

    def __iter__(self) -> Iterator[str]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:
        return f"ResultStore({self.counts()!r})"

    def items(self) -> Iterator[tuple[str, list[ResultRecord]]]:
        for name, records in self._results.items():
            yield name, list(records)

    def records(self) -> list[ResultRecord]:
        """Every record in the store, grouped by test in first-insertion order."""
        return [record for records in self._results.values() for record in records]

    def count(self, kind: ResultKind, test_name: str | None = None) -> int:
        records = self.records() if test_name is None else self._results.get(test_name, [])
        return sum(1 for r in records if r.kind is kind)

    def counts(self, test_name: str | None = None) -> dict[ResultKind, int]:
        return {kind: self.count(kind, test_name) for kind in ResultKind}

    @property
    def passed(self) -> int:
        """Count of passing records."""
        return self.count(ResultKind.PASS)

    @property
    def failed(self) -> int:
        """Count of failing records."""
        return self.count(ResultKind.FAIL)

    @property
    def xfailed(self) -> int:
        """Count of expected failures."""
        return self.count(ResultKind.XFAIL)

    @property
    def total(self) -> int:
        """Total record count."""
        return len(self.records())

    @property
    def has_failures(self) -> bool:
        return self.failed > 0
