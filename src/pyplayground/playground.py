"""
The playground session context.

One ``Playground`` is created when the host finishes loading and lives as
long as the host. It owns the editor, the output sink and the session store,
and implements the run and dialect-switch sequences.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pyplayground._types import CompileFailure, Dialect, LogLevel, RunState
from pyplayground.editor import CLEAR_KEYBINDING, RUN_KEYBINDING
from pyplayground.sandbox import SandboxConsole, ScopedSandbox
from pyplayground.session.examples import EXAMPLES, is_example_code

if TYPE_CHECKING:
    from pyplayground.compiler import Compiler
    from pyplayground.editor import Editor
    from pyplayground.output import OutputSink
    from pyplayground.sandbox import Sandbox
    from pyplayground.session.store import SessionStore

logger = logging.getLogger(__name__)


class Playground:
    """
    Compile-then-run loop over a single buffer.

    Args:
        editor: The editing surface holding the buffer.
        output: Sink receiving console output and run outcomes.
        store: Session persistence.
        compiler: Compiler adapter for both dialects.
        sandbox: Executes compiled text. Defaults to ScopedSandbox.
        dialect: Dialect of the buffer at start-up.

    Example:
        >>> playground = Playground(editor, OutputSink(), store, Compiler())
        >>> playground.bind()
        >>> playground.run()
        <RunState.COMPLETED: 'completed'>
    """

    def __init__(
        self,
        editor: Editor,
        output: OutputSink,
        store: SessionStore,
        compiler: Compiler,
        *,
        sandbox: Sandbox | None = None,
        dialect: Dialect = Dialect.TYPED,
    ) -> None:
        self.editor = editor
        self.output = output
        self.store = store
        self.compiler = compiler
        self.sandbox = sandbox or ScopedSandbox()
        self._dialect = dialect
        self._state = RunState.IDLE

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def state(self) -> RunState:
        return self._state

    def bind(
        self,
        *,
        run_keybinding: str = RUN_KEYBINDING,
        clear_keybinding: str = CLEAR_KEYBINDING,
    ) -> None:
        """Register the run/clear keybindings and save on every edit."""
        self.editor.add_command(run_keybinding, self.run)
        self.editor.add_command(clear_keybinding, self.clear_output)
        self.editor.on_change(self.save)

    def save(self) -> None:
        self.store.save(self.editor.get_value(), self._dialect)

    def clear_output(self) -> None:
        self.output.clear()

    def run(self) -> RunState:
        """
        Compile and execute the current buffer.

        Outcomes are reported to the output sink. Returns the terminal
        state of this run; ``state`` is back to IDLE afterwards.
        """
        source = self.editor.get_value()
        try:
            return self._run(source)
        finally:
            self._enter(RunState.IDLE)

    def _run(self, source: str) -> RunState:
        self._enter(RunState.COMPILING)
        compiled = self.compiler.compile(source, self._dialect)
        if isinstance(compiled, CompileFailure):
            self._enter(RunState.COMPILE_FAILED)
            self.output.append(LogLevel.ERROR, "Compilation Error:", compiled.diagnostic)
            return RunState.COMPILE_FAILED
        self._enter(RunState.COMPILED)

        console = SandboxConsole(self.output)
        self._enter(RunState.EXECUTING)
        result = self.sandbox.execute(compiled.executable_text, console)

        if result.error is not None:
            self._enter(RunState.THREW)
            self.output.append(LogLevel.ERROR, "Runtime Error:", result.error.message)
            return RunState.THREW

        self._enter(RunState.COMPLETED)
        if result.has_value:
            self.output.append(LogLevel.RESULT, "→", result.value)
        return RunState.COMPLETED

    def switch_dialect(self, dialect: Dialect) -> None:
        """
        Change the buffer's dialect.

        An untouched example buffer is swapped for the new dialect's example;
        an edited buffer is kept as is. Output is always cleared.
        """
        if dialect is self._dialect:
            return

        self._dialect = dialect
        self.editor.set_language(dialect.editor_mode)

        if is_example_code(self.editor.get_value()):
            self.editor.set_value(EXAMPLES[dialect])

        self.output.clear()
        self.output.append(LogLevel.INFO, f"Switched to {dialect.label} mode.")
        self.save()

    def _enter(self, state: RunState) -> None:
        logger.debug("Run state %s -> %s", self._state.value, state.value)
        self._state = state
