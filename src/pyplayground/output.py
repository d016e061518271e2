"""
Output sink: the timestamped, append-only log shown next to the editor.

Used both by executed code (through the sandbox console) and by the host to
report compile and run outcomes.
"""

from __future__ import annotations

import dataclasses
import enum
import inspect
import json
import logging
from datetime import datetime
from typing import Callable, Iterable, Protocol, TextIO

from pyplayground._types import UNDEFINED, LogEntry, LogLevel

logger = logging.getLogger(__name__)

_SCALARS = (str, bytes, int, float, complex, bool, BaseException, enum.Enum)


class OutputView(Protocol):
    """Something that displays entries as they arrive."""

    def render(self, entry: LogEntry) -> None: ...

    def clear(self) -> None: ...

    def scroll_to_end(self) -> None: ...


class StreamView:
    """Writes one ``HH:MM:SS.mmm [level] text`` line per entry to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def render(self, entry: LogEntry) -> None:
        self._stream.write(f"{entry.timestamp} [{entry.level.value}] {entry.rendered_text}\n")

    def clear(self) -> None:
        self._stream.write("\n")

    def scroll_to_end(self) -> None:
        self._stream.flush()


def format_timestamp(moment: datetime) -> str:
    """24-hour ``hour:minute:second.millisecond``."""
    return f"{moment:%H:%M:%S}.{moment.microsecond // 1000:03d}"


def _is_function(value: object) -> bool:
    return (
        inspect.isfunction(value)
        or inspect.ismethod(value)
        or inspect.isclass(value)
        or inspect.isbuiltin(value)
    )


def _to_json(value: object) -> object:
    """``default`` hook for json.dumps."""
    if isinstance(value, (set, frozenset)):
        try:
            return sorted(value)
        except TypeError:
            return list(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, "__dict__") and not _is_function(value):
        return {k: v for k, v in vars(value).items() if not callable(v)}
    raise TypeError(f"Object of type {type(value).__name__} is not serializable")


def _is_structured(value: object) -> bool:
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return True
    if inspect.ismodule(value):
        return False
    return dataclasses.is_dataclass(value) or hasattr(value, "__dict__")


def format_value(value: object) -> str:
    """
    Render a single value for display.

    - ``UNDEFINED`` and ``None`` render as fixed labels.
    - Functions, methods and classes render as their source text.
    - Containers and objects render as indented JSON, or ``str()`` when
      they cannot be serialized (cycles, exotic keys). Nested ``None``,
      ``True`` and ``False`` therefore read ``null``, ``true`` and
      ``false``, while the same values at top level read as Python does.
    - Everything else uses ``str()``.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "None"
    try:
        if _is_function(value):
            try:
                return inspect.getsource(value).rstrip("\n")
            except (OSError, TypeError):
                return repr(value)
        if not isinstance(value, _SCALARS) and _is_structured(value):
            try:
                return json.dumps(value, indent=2, default=_to_json, ensure_ascii=False)
            except (TypeError, ValueError, RecursionError):
                return str(value)
        return str(value)
    except Exception:
        # A user-defined __str__/__repr__ raised.
        return object.__repr__(value)


class OutputSink:
    """
    Ordered sequence of log entries.

    ``append`` never raises. ``clear`` drops every entry at once; there is
    no partial removal.

    Args:
        view: Optional display that mirrors the sequence.
        clock: Source of "now", called once per append.
    """

    def __init__(
        self,
        view: OutputView | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._entries: list[LogEntry] = []
        self._view = view
        self._clock = clock

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Snapshot of the current sequence."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, level: LogLevel, *values: object) -> None:
        entry = LogEntry(
            level=level,
            timestamp=format_timestamp(self._clock()),
            rendered_text=" ".join(format_value(v) for v in values),
        )
        self._entries.append(entry)

        if self._view is not None:
            try:
                self._view.render(entry)
                self._view.scroll_to_end()
            except Exception:
                logger.warning("Output view failed to render entry", exc_info=True)

    def clear(self) -> None:
        self._entries = []
        if self._view is not None:
            try:
                self._view.clear()
            except Exception:
                logger.warning("Output view failed to clear", exc_info=True)

    def transcript(self) -> str:
        return render_transcript(self._entries)


def render_transcript(entries: Iterable[LogEntry]) -> str:
    """Plain-text dump, one ``level: text`` line per entry."""
    return "\n".join(f"{e.level.value}: {e.rendered_text}" for e in entries)
