"""
mypy-based compiler backend.

Checks the buffer with mypy in strict mode, then erases annotations so the
plain interpreter can run it.
"""

from __future__ import annotations

import logging
import os
import re
import time

from pyplayground._types import Diagnostic
from pyplayground.compiler._base import CompilerOptions, TranspileBackend, TranspileOutput
from pyplayground.compiler.strip import strip_annotations
from pyplayground.errors import DependencyError

logger = logging.getLogger(__name__)

# Declares the injected console for the checker. Must match SandboxConsole.
PRELUDE = """\
class _PlaygroundConsole:
    def log(self, *values: object) -> None: ...
    def error(self, *values: object) -> None: ...
    def warn(self, *values: object) -> None: ...
    def info(self, *values: object) -> None: ...
    def clear(self) -> None: ...


console: _PlaygroundConsole
"""

PRELUDE_LINES = PRELUDE.count("\n")

_ERROR_LINE = re.compile(
    r"^(?P<file>.+?):(?P<line>\d+):(?:(?P<column>\d+):)? error: "
    r"(?P<message>.*?)(?:\s+\[(?P<code>[a-z0-9-]+)\])?$"
)


class MypyBackend(TranspileBackend):
    """
    Strict type checking via ``mypy.api``.

    Every call runs mypy from scratch: incremental mode is off and the
    cache directory points at the null device.

    Example:
        >>> backend = MypyBackend()
        >>> out = backend.transpile('x: int = "bad"', CompilerOptions())
        >>> out.diagnostics[0].code
        'assignment'
    """

    def __init__(self) -> None:
        try:
            from mypy import api
        except ImportError as e:
            raise DependencyError(
                "Typed dialect requires 'mypy'. Install with: pip install mypy"
            ) from e

        self._run = api.run

    def transpile(self, text: str, options: CompilerOptions) -> TranspileOutput:
        started = time.perf_counter()
        stdout, stderr, status = self._run(self._build_args(PRELUDE + text, options))
        logger.debug(
            "mypy finished with status %d in %.3fs", status, time.perf_counter() - started
        )

        diagnostics = self._parse(stdout)
        if not diagnostics and status != 0:
            # Fatal errors (bad options, crashes) carry no position.
            message = (stderr or stdout).strip() or f"mypy exited with status {status}"
            diagnostics = [Diagnostic(line=0, column=0, message=message)]
        if diagnostics:
            return TranspileOutput(text="", diagnostics=diagnostics)

        if not options.emit:
            return TranspileOutput(text="")

        try:
            executable = strip_annotations(text)
        except SyntaxError as e:
            return TranspileOutput(
                text="",
                diagnostics=[
                    Diagnostic(
                        line=e.lineno or 0,
                        column=e.offset or 0,
                        message=e.msg,
                        code="syntax",
                    )
                ],
            )
        return TranspileOutput(text=executable)

    def _build_args(self, program: str, options: CompilerOptions) -> list[str]:
        args = [
            "--python-version",
            options.target_version,
            "--no-incremental",
            "--cache-dir",
            os.devnull,
            "--show-column-numbers",
            "--show-error-codes",
            "--no-error-summary",
            "--no-color-output",
            "--hide-error-context",
        ]
        if options.strict:
            args.append("--strict")
        args.extend(["-c", program])
        return args

    def _parse(self, report: str) -> list[Diagnostic]:
        """Extract error lines, shifted back past the prelude."""
        diagnostics: list[Diagnostic] = []
        for raw in report.splitlines():
            match = _ERROR_LINE.match(raw.strip())
            if not match:
                continue
            line = int(match.group("line")) - PRELUDE_LINES
            diagnostics.append(
                Diagnostic(
                    line=max(line, 1),
                    column=int(match.group("column") or 1),
                    message=match.group("message"),
                    code=match.group("code"),
                )
            )
        return diagnostics
