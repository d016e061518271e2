"""
Compiler adapter: typed source to executable text.
"""

from __future__ import annotations

import logging

from pyplayground._types import CompileFailure, CompileResult, CompileSuccess, Dialect
from pyplayground.compiler._base import CompilerOptions, TranspileBackend, TranspileOutput
from pyplayground.compiler.strip import strip_annotations

logger = logging.getLogger(__name__)


class Compiler:
    """
    Turns a buffer into executable text, or reports the first diagnostic.

    The untyped dialect is passed through untouched: it has no
    pre-execution diagnostic phase, so its syntax errors only surface
    when the sandbox tries to run it.

    Args:
        backend: Backend used for the typed dialect. Created lazily
            (as a MypyBackend) on first typed compile when omitted.
        options: Fixed options for every transpile.
    """

    def __init__(
        self,
        backend: TranspileBackend | None = None,
        *,
        options: CompilerOptions | None = None,
    ) -> None:
        self._backend = backend
        self.options = options or CompilerOptions()

    @property
    def backend(self) -> TranspileBackend:
        if self._backend is None:
            from pyplayground.compiler.mypy_backend import MypyBackend

            self._backend = MypyBackend()
        return self._backend

    def compile(self, source: str, dialect: Dialect) -> CompileResult:
        if dialect is Dialect.UNTYPED:
            return CompileSuccess(executable_text=source)

        output = self.backend.transpile(source, self.options)
        if output.diagnostics:
            first = output.diagnostics[0]
            logger.debug("Compile rejected with %d diagnostic(s)", len(output.diagnostics))
            return CompileFailure(diagnostic=str(first))
        return CompileSuccess(executable_text=output.text)


__all__ = [
    "Compiler",
    "CompilerOptions",
    "TranspileBackend",
    "TranspileOutput",
    "strip_annotations",
]
