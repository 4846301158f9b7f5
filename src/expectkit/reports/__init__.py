"""Result reporters."""

from expectkit.reports.base import Reporter
from expectkit.reports.console import ConsoleReporter


__all__ = [
    "ConsoleReporter",
    "Reporter",
]
