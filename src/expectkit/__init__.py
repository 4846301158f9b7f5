"""expectkit - a small expectation-based unit testing framework."""

from .case import TestCase
from .config import ExpectkitSettings, get_settings
from .context import TestContext, get_test_context
from .discovery import MethodDiscovery, PrefixMethodDiscovery, TestMethod
from .errors import EventLoopRunningError, ExpectkitError, OutsideTestError
from .location import LocationResolver, StackLocationResolver
from .reports import ConsoleReporter, Reporter
from .results import ResultKind, ResultRecord, ResultStore, SourceLocation
from .runner import Runner, run
from .version import __version__


__all__ = [
    # Core testing
    "TestCase",
    "Runner",
    "run",
    # Results
    "ResultKind",
    "ResultRecord",
    "ResultStore",
    "SourceLocation",
    # Extension points
    "MethodDiscovery",
    "PrefixMethodDiscovery",
    "TestMethod",
    "LocationResolver",
    "StackLocationResolver",
    "Reporter",
    "ConsoleReporter",
    "TestContext",
    "get_test_context",
    # Configuration
    "ExpectkitSettings",
    "get_settings",
    # Errors
    "ExpectkitError",
    "OutsideTestError",
    "EventLoopRunningError",
]
