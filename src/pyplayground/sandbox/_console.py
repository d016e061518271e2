"""
The console capability injected into executed code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pyplayground._types import LogLevel

if TYPE_CHECKING:
    from pyplayground.output import OutputSink


class SandboxConsole:
    """
    Narrow console handed to user code as ``console``.

    Exposes exactly ``log``, ``error``, ``warn``, ``info`` and ``clear``.
    The instance stays bound to its sink after the run returns, so
    callbacks the code scheduled can still log. The sink itself is not
    an attribute; only closures over its append and clear are kept.
    """

    __slots__ = ("_emit", "_clear")

    def __init__(self, sink: OutputSink) -> None:
        def emit(level: LogLevel, values: tuple[object, ...]) -> None:
            sink.append(level, *values)

        def clear() -> None:
            sink.clear()

        self._emit: Callable[[LogLevel, tuple[object, ...]], None] = emit
        self._clear: Callable[[], None] = clear

    def log(self, *values: object) -> None:
        self._emit(LogLevel.LOG, values)

    def error(self, *values: object) -> None:
        self._emit(LogLevel.ERROR, values)

    def warn(self, *values: object) -> None:
        self._emit(LogLevel.WARN, values)

    def info(self, *values: object) -> None:
        self._emit(LogLevel.INFO, values)

    def clear(self) -> None:
        self._clear()

    def __repr__(self) -> str:
        return "<console>"
