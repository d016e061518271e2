"""Pytest configuration and fixtures for pyplayground tests."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

import pytest

from pyplayground import (
    BufferEditor,
    Compiler,
    Dialect,
    MemoryStorage,
    OutputSink,
    Playground,
    SessionStore,
)


class FakeClock:
    """Clock that moves forward one millisecond per reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 13, 5, 9, 123000)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(milliseconds=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink(clock: FakeClock) -> OutputSink:
    """Create an OutputSink with a deterministic clock."""
    return OutputSink(clock=clock)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture(scope="session")
def compiler() -> Compiler:
    """Compiler backed by mypy. Holds no state between compiles."""
    return Compiler()


@pytest.fixture
def make_playground(
    sink: OutputSink, store: SessionStore, compiler: Compiler
) -> Callable[..., Playground]:
    """Build a bound Playground around an in-memory editor."""

    def factory(text: str = "", dialect: Dialect = Dialect.UNTYPED) -> Playground:
        editor = BufferEditor(text, dialect.editor_mode)
        playground = Playground(editor, sink, store, compiler, dialect=dialect)
        playground.bind()
        return playground

    return factory
