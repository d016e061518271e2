"""
In-process sandbox implementation.

Each run gets a fresh module-like scope. This is the default (and only)
sandbox: the playground does not isolate hostile code.
"""

from __future__ import annotations

import ast
import builtins
import itertools
import linecache
import logging
import threading
from collections import deque
from typing import TYPE_CHECKING

from pyplayground._types import UNDEFINED, ExecutionResult, ScriptError
from pyplayground.sandbox._base import Sandbox

if TYPE_CHECKING:
    from types import CodeType

    from pyplayground.sandbox._console import SandboxConsole

logger = logging.getLogger(__name__)

SCOPE_NAME = "__playground__"

# Sources of this many recent runs stay in linecache for inspect.getsource().
MAX_CACHED_RUNS = 32

_run_ids = itertools.count(1)
_cached_runs: deque[str] = deque()
_cache_lock = threading.Lock()


class ScopedSandbox(Sandbox):
    """
    Runs code with ``exec`` in a new globals dict per run.

    The last top-level statement, when it is an expression, is evaluated
    separately so its value becomes the completion value (like the
    interactive interpreter, ``None`` counts as no value).

    ``SystemExit`` is reported like any other error, so ``sys.exit()`` ends
    the run rather than the host. ``KeyboardInterrupt`` is not captured.

    Example:
        >>> sandbox = ScopedSandbox()
        >>> sandbox.execute("1 + 1", console).value
        2
    """

    def execute(self, executable_text: str, console: SandboxConsole) -> ExecutionResult:
        filename = f"<playground-{next(_run_ids)}>"
        self._register_source(filename, executable_text)

        scope: dict[str, object] = {
            "__name__": SCOPE_NAME,
            "__builtins__": builtins,
            "console": console,
        }

        try:
            body, last = self._split(executable_text, filename)
            exec(body, scope)
            if last is None:
                return ExecutionResult()
            value = eval(last, scope)
        except (Exception, SystemExit) as e:
            logger.debug("Executed code raised %s", type(e).__name__)
            return ExecutionResult(error=ScriptError(_message(e), type(e).__name__))

        if value is None:
            return ExecutionResult()
        return ExecutionResult(has_value=True, value=value)

    def _split(self, text: str, filename: str) -> tuple[CodeType, CodeType | None]:
        """Compile the body and, separately, a trailing expression statement."""
        tree = ast.parse(text, filename, "exec")
        last: CodeType | None = None
        if tree.body and isinstance(tree.body[-1], ast.Expr):
            expr = ast.Expression(tree.body.pop().value)
            last = compile(expr, filename, "eval", dont_inherit=True)
        return compile(tree, filename, "exec", dont_inherit=True), last

    @staticmethod
    def _register_source(filename: str, text: str) -> None:
        # Lets inspect.getsource() find functions defined by this run.
        lines = text.splitlines(keepends=True)
        with _cache_lock:
            linecache.cache[filename] = (len(text), None, lines, filename)
            _cached_runs.append(filename)
            while len(_cached_runs) > MAX_CACHED_RUNS:
                linecache.cache.pop(_cached_runs.popleft(), None)


def _message(error: BaseException) -> str:
    if isinstance(error, SyntaxError):
        return error.msg or type(error).__name__
    return str(error) or type(error).__name__
