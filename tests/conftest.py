import io

import pytest
from rich.console import Console

from expectkit.config import ExpectkitSettings, get_settings
from expectkit.reports import ConsoleReporter
from expectkit.runner import Runner


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep environment-driven settings from leaking between tests."""
    for name in ("EXPECTKIT_TEST_PREFIX", "EXPECTKIT_VERBOSE", "EXPECTKIT_COLOR"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(output: io.StringIO) -> ConsoleReporter:
    console = Console(file=output, width=200, force_terminal=False, no_color=True)
    return ConsoleReporter(console=console, color=False)


@pytest.fixture
def runner(reporter: ConsoleReporter) -> Runner:
    """Runner printing plain text into the ``output`` buffer."""
    return Runner(reporter=reporter, settings=ExpectkitSettings())
