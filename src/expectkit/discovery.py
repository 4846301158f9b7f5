"""Test method discovery on test case instances."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from types import CodeType
from typing import Any, Protocol


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TestMethod:
    """A discovered zero-argument test method bound to its test case."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    method_name: str
    name: str
    fn: Callable[[], Any]
    is_async: bool

    @property
    def code(self) -> CodeType | None:
        """Code object of the underlying function, used to find its frames."""
        func = getattr(self.fn, "__func__", self.fn)
        return getattr(func, "__code__", None)


class MethodDiscovery(Protocol):
    """Enumerates the test methods of a test case instance."""

    def discover(self, unit: object) -> list[TestMethod]:
        """Return the test methods of ``unit`` in execution order."""
        ...


class PrefixMethodDiscovery:
    """Discovers plain methods whose name starts with ``prefix``.

    Methods are returned in declaration order, base classes first. A method
    overridden in a subclass keeps the position of its first declaration and
    runs the override. Static methods, class methods and non-callable
    attributes are ignored.

    Example:
        discovery = PrefixMethodDiscovery("test_")
        for test in discovery.discover(MyTests()):
            print(test.name)
    """

    def __init__(self, prefix: str = "test_") -> None:
        if not prefix:
            raise ValueError("prefix must not be empty")
        self.prefix = prefix

    def test_name(self, method_name: str) -> str:
        """Human-readable test name: the method name without the prefix."""
        return method_name[len(self.prefix):]

    def is_test_name(self, name: str) -> bool:
        return name.startswith(self.prefix) and len(name) > len(self.prefix)

    def discover(self, unit: object) -> list[TestMethod]:
        names: list[str] = []
        for klass in reversed(type(unit).__mro__):
            for name, attr in vars(klass).items():
                if not self.is_test_name(name) or not inspect.isfunction(attr):
                    continue
                if name not in names:
                    names.append(name)

        methods = []
        for name in names:
            fn = getattr(unit, name)
            # Shadowed in a subclass by something that is not a method.
            if not inspect.ismethod(fn):
                continue
            methods.append(
                TestMethod(
                    method_name=name,
                    name=self.test_name(name),
                    fn=fn,
                    is_async=inspect.iscoroutinefunction(fn),
                )
            )

        logger.debug("Discovered %d test methods on %s", len(methods), type(unit).__qualname__)
        return methods
