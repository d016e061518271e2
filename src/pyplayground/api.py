"""
Main entry points: the ``launch`` host bootstrap and ``run_snippet``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from pyplayground._types import Dialect, LogEntry, LogLevel, RunState
from pyplayground.compiler import Compiler
from pyplayground.compiler.mypy_backend import MypyBackend
from pyplayground.config import PlaygroundConfig
from pyplayground.editor import BufferEditor
from pyplayground.output import OutputSink, render_transcript
from pyplayground.playground import Playground
from pyplayground.session.storage import FileStorage, MemoryStorage
from pyplayground.session.store import SessionStore

if TYPE_CHECKING:
    from pyplayground.compiler import TranspileBackend
    from pyplayground.editor import Editor, Mount
    from pyplayground.output import OutputView
    from pyplayground.session.storage import KeyValueStorage

logger = logging.getLogger(__name__)

READY_MESSAGE = "Python Playground ready. Press {run} to run code."
CHECKING_MESSAGE = "Typed Python is checked strictly before it runs."


def launch(
    mount: Mount,
    *,
    config: PlaygroundConfig | None = None,
    storage: KeyValueStorage | None = None,
    editor_factory: Callable[[str, str], Editor] = BufferEditor,
    backend_factory: Callable[[], TranspileBackend] = MypyBackend,
    view: OutputView | None = None,
) -> Playground | None:
    """
    Load the playground and build its session context.

    Restores the saved session (or the canned example), creates the editor,
    wires keybindings and auto-save, and announces readiness in the output.

    Any failure while loading is fatal for the session: it is logged, the
    mount shows a static error message, and None is returned. There is no
    retry.

    Args:
        mount: Where the editor lives; receives the error message on failure.
        config: Host configuration. Defaults to PlaygroundConfig().
        storage: Session storage. Defaults to a FileStorage at
                 config.storage_path, or memory when that is None.
        editor_factory: Called with (initial_text, language_mode).
        backend_factory: Creates the typed-dialect compiler backend.
        view: Optional display mirroring the output sink.

    Returns:
        The Playground, or None when loading failed.

    Example:
        >>> mount = MemoryMount()
        >>> playground = launch(mount, config=PlaygroundConfig(storage_path=None))
        >>> playground.run()
    """
    config = config or PlaygroundConfig()

    try:
        backend = backend_factory()
        if storage is None:
            storage = (
                FileStorage(config.storage_path)
                if config.storage_path is not None
                else MemoryStorage()
            )
        store = SessionStore(storage, default_dialect=config.default_dialect)
        saved = store.load()
        editor = editor_factory(saved.source_text, saved.dialect.editor_mode)
    except Exception as e:
        logger.exception("Failed to load playground")
        mount.show_error(f"Error loading editor: {e}")
        return None

    playground = Playground(
        editor,
        OutputSink(view),
        store,
        Compiler(backend, options=config.compiler),
        dialect=saved.dialect,
    )
    playground.bind(
        run_keybinding=config.run_keybinding,
        clear_keybinding=config.clear_keybinding,
    )
    playground.output.append(LogLevel.INFO, READY_MESSAGE.format(run=config.run_keybinding))
    playground.output.append(LogLevel.INFO, CHECKING_MESSAGE)
    logger.debug("Playground ready in %s mode", saved.dialect.value)
    return playground


@dataclass(frozen=True)
class RunReport:
    """Outcome of a one-shot run."""

    state: RunState
    entries: tuple[LogEntry, ...]

    @property
    def success(self) -> bool:
        """Return True if the code compiled and ran to completion."""
        return self.state is RunState.COMPLETED

    def transcript(self) -> str:
        return render_transcript(self.entries)


def run_snippet(
    source: str,
    dialect: Dialect = Dialect.TYPED,
    *,
    compiler: Compiler | None = None,
) -> RunReport:
    """
    Run ``source`` once in a throwaway, in-memory playground.

    Example:
        >>> report = run_snippet("1 + 1")
        >>> report.transcript()
        'result: → 2'
    """
    playground = Playground(
        BufferEditor(source, dialect.editor_mode),
        OutputSink(),
        SessionStore(MemoryStorage()),
        compiler or Compiler(),
        dialect=dialect,
    )
    state = playground.run()
    return RunReport(state=state, entries=playground.output.entries)
