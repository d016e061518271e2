"""
Top-level facade for pyplayground.
"""

from pyplayground._types import (
    UNDEFINED,
    CompileFailure,
    CompileResult,
    CompileSuccess,
    Diagnostic,
    Dialect,
    ExecutionResult,
    LogEntry,
    LogLevel,
    RunState,
    ScriptError,
)
from pyplayground.api import RunReport, launch, run_snippet
from pyplayground.compiler import Compiler, CompilerOptions, TranspileBackend
from pyplayground.config import PlaygroundConfig
from pyplayground.editor import BufferEditor, Editor, MemoryMount, Mount
from pyplayground.errors import ConfigurationError, DependencyError, PlaygroundError
from pyplayground.output import OutputSink, OutputView, StreamView, format_value
from pyplayground.playground import Playground
from pyplayground.sandbox import Sandbox, SandboxConsole, ScopedSandbox
from pyplayground.session import (
    FileStorage,
    KeyValueStorage,
    MemoryStorage,
    SavedSession,
    SessionStore,
)

__all__ = [
    "UNDEFINED",
    "BufferEditor",
    "CompileFailure",
    "CompileResult",
    "CompileSuccess",
    "Compiler",
    "CompilerOptions",
    "ConfigurationError",
    "DependencyError",
    "Diagnostic",
    "Dialect",
    "Editor",
    "ExecutionResult",
    "FileStorage",
    "KeyValueStorage",
    "LogEntry",
    "LogLevel",
    "MemoryMount",
    "MemoryStorage",
    "Mount",
    "OutputSink",
    "OutputView",
    "Playground",
    "PlaygroundConfig",
    "PlaygroundError",
    "RunReport",
    "RunState",
    "Sandbox",
    "SandboxConsole",
    "SavedSession",
    "ScopedSandbox",
    "ScriptError",
    "SessionStore",
    "StreamView",
    "TranspileBackend",
    "format_value",
    "launch",
    "run_snippet",
]
