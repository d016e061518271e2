"""
The editing surface, as seen by the playground.

Real hosts plug in their own editor widget; ``BufferEditor`` is an
in-memory stand-in for headless use and tests.
"""

from __future__ import annotations

from typing import Callable, Protocol

RUN_KEYBINDING = "Ctrl+Enter"
CLEAR_KEYBINDING = "Ctrl+L"


class Editor(Protocol):
    """The five editor operations the playground relies on."""

    def get_value(self) -> str: ...

    def set_value(self, text: str) -> None: ...

    def set_language(self, mode: str) -> None: ...

    def on_change(self, callback: Callable[[], None]) -> None: ...

    def add_command(self, keybinding: str, handler: Callable[[], object]) -> None: ...


class Mount(Protocol):
    """Where the editor is shown. Only used to report a failed load."""

    def show_error(self, message: str) -> None: ...


class BufferEditor:
    """
    In-memory editor.

    ``set_value`` notifies change listeners, like a real editor model does.

    Example:
        >>> editor = BufferEditor("1 + 1")
        >>> editor.add_command("Ctrl+Enter", playground.run)
        >>> editor.press("Ctrl+Enter")
    """

    def __init__(self, text: str = "", language: str = "python") -> None:
        self._text = text
        self.language = language
        self._listeners: list[Callable[[], None]] = []
        self._commands: dict[str, Callable[[], object]] = {}

    def get_value(self) -> str:
        return self._text

    def set_value(self, text: str) -> None:
        self._text = text
        for listener in list(self._listeners):
            listener()

    def set_language(self, mode: str) -> None:
        self.language = mode

    def on_change(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def add_command(self, keybinding: str, handler: Callable[[], object]) -> None:
        self._commands[keybinding] = handler

    def press(self, keybinding: str) -> object:
        """Dispatch a keybinding; unbound keys do nothing."""
        handler = self._commands.get(keybinding)
        if handler is None:
            return None
        return handler()


class MemoryMount:
    """Mount that records the error it was asked to show."""

    def __init__(self) -> None:
        self.error: str | None = None

    def show_error(self, message: str) -> None:
        self.error = message
