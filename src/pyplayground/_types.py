"""
Core type definitions for pyplayground.

Uses dataclasses and enums for lightweight, typed abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Dialect(Enum):
    """Script dialect of the live buffer."""

    TYPED = "typed"  # Checked strictly, annotations erased before running
    UNTYPED = "untyped"  # Executed as written

    @property
    def label(self) -> str:
        """Human-readable dialect name."""
        return "Typed Python" if self is Dialect.TYPED else "Python"

    @property
    def editor_mode(self) -> str:
        """Language mode understood by the editing surface."""
        return "typed-python" if self is Dialect.TYPED else "python"


class LogLevel(Enum):
    """Level of an output entry."""

    LOG = "log"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    RESULT = "result"


class RunState(Enum):
    """Lifecycle of a single run."""

    IDLE = "idle"
    COMPILING = "compiling"
    COMPILE_FAILED = "compile_failed"
    COMPILED = "compiled"
    EXECUTING = "executing"
    THREW = "threw"
    COMPLETED = "completed"


class _Undefined:
    """Marker for "no value was produced"."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


@dataclass(frozen=True, slots=True)
class LogEntry:
    """Immutable line of captured output."""

    level: LogLevel
    timestamp: str
    rendered_text: str


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single checker-reported problem, positioned in the user's buffer."""

    line: int
    column: int
    message: str
    code: str | None = None

    def __str__(self) -> str:
        text = self.message
        if self.line > 0:
            text = f"{self.line}:{self.column}: {text}"
        if self.code:
            text += f" [{self.code}]"
        return text


@dataclass(frozen=True, slots=True)
class CompileSuccess:
    """Source compiled to executable text."""

    executable_text: str


@dataclass(frozen=True, slots=True)
class CompileFailure:
    """Compilation rejected the source; nothing should run."""

    diagnostic: str


CompileResult = Union[CompileSuccess, CompileFailure]


@dataclass(frozen=True, slots=True)
class ScriptError:
    """Exception raised synchronously by executed code."""

    message: str
    exception_type: str = "Exception"


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Outcome of executing one piece of executable text."""

    has_value: bool = False
    value: object = UNDEFINED
    error: ScriptError | None = None

    @property
    def success(self) -> bool:
        """Return True if the code ran to completion."""
        return self.error is None
