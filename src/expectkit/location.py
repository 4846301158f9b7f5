"""Call-site resolution for expectations and unhandled exceptions."""

from __future__ import annotations

import inspect
from functools import lru_cache
from pathlib import Path
from types import FrameType, TracebackType
from typing import TYPE_CHECKING, Protocol

from expectkit.results import SourceLocation


if TYPE_CHECKING:
    from expectkit.context import TestContext


_PACKAGE_DIR = Path(__file__).resolve().parent


@lru_cache(maxsize=None)
def _is_framework_file(filename: str) -> bool:
    try:
        return Path(filename).resolve().is_relative_to(_PACKAGE_DIR)
    except (OSError, ValueError):
        return False


class LocationResolver(Protocol):
    """Resolves the source location of a record for the running test."""

    def resolve(self, ctx: TestContext) -> SourceLocation | None:
        """Location of the expectation currently being evaluated."""
        ...

    def resolve_exception(self, ctx: TestContext, exc: BaseException) -> SourceLocation | None:
        """Location at which ``exc`` escaped the test method."""
        ...


class StackLocationResolver:
    """Resolves locations by inspecting the live stack or a traceback.

    The frame executing the test method's own code wins. When the test
    method is not on the stack (an expectation made from ``set_up`` for
    instance) the nearest frame outside this package is used instead.
    """

    def resolve(self, ctx: TestContext) -> SourceLocation | None:
        frame = inspect.currentframe()
        try:
            target = self._find_frame(frame, ctx)
            if target is None:
                return None
            return self._location(target.f_code.co_filename, ctx.test_name, target.f_lineno)
        finally:
            del frame

    def resolve_exception(self, ctx: TestContext, exc: BaseException) -> SourceLocation | None:
        target = self._find_traceback_entry(exc.__traceback__, ctx)
        if target is None:
            return None
        return self._location(target.tb_frame.f_code.co_filename, ctx.test_name, target.tb_lineno)

    def _find_frame(self, frame: FrameType | None, ctx: TestContext) -> FrameType | None:
        code = ctx.test.code
        fallback = None
        while frame is not None:
            if code is not None and frame.f_code is code:
                return frame
            if fallback is None and not _is_framework_file(frame.f_code.co_filename):
                fallback = frame
            frame = frame.f_back
        return fallback

    def _find_traceback_entry(self, tb: TracebackType | None, ctx: TestContext) -> TracebackType | None:
        code = ctx.test.code
        match = None
        fallback = None
        while tb is not None:
            if code is not None and tb.tb_frame.f_code is code:
                match = tb
            if fallback is None and not _is_framework_file(tb.tb_frame.f_code.co_filename):
                fallback = tb
            tb = tb.tb_next
        return match or fallback

    @staticmethod
    def _location(filename: str, test_name: str, line: int | None) -> SourceLocation:
        return SourceLocation(file=Path(filename).name, test_name=test_name, line=line or 0)
