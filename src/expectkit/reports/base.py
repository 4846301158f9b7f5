"""Reporter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from expectkit.results import ResultStore


class Reporter(ABC):
    """Renders the results of one test case run."""

    @abstractmethod
    def render(self, unit_name: str, store: ResultStore, verbose: bool = False) -> None:
        """Render ``store`` for the test case named ``unit_name``.

        Parameters
        ----------
        unit_name : str
            Name of the test case class.
        store : ResultStore
            Records produced by the run.
        verbose : bool
            Render every record instead of failures only.
        """
