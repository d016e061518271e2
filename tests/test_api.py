"""Tests for the launch bootstrap, configuration and run_snippet."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from pyplayground import (
    CompilerOptions,
    ConfigurationError,
    Dialect,
    LogLevel,
    MemoryMount,
    MemoryStorage,
    PlaygroundConfig,
    RunState,
    SessionStore,
    launch,
    run_snippet,
)
from pyplayground.api import CHECKING_MESSAGE, READY_MESSAGE
from pyplayground.compiler import TranspileBackend
from pyplayground.editor import BufferEditor
from pyplayground.session import EXAMPLES


def in_memory(**overrides: Any) -> PlaygroundConfig:
    return PlaygroundConfig(storage_path=None, **overrides)


class TestLaunch:
    """Tests for the launch() host bootstrap."""

    def test_first_visit_shows_typed_example(self) -> None:
        """With nothing saved, the typed example is loaded and readiness announced."""
        mount = MemoryMount()
        playground = launch(mount, config=in_memory())

        assert playground is not None
        assert mount.error is None
        assert playground.dialect is Dialect.TYPED
        assert playground.editor.get_value() == EXAMPLES[Dialect.TYPED]
        assert [e.level for e in playground.output.entries] == [LogLevel.INFO, LogLevel.INFO]
        assert [e.rendered_text for e in playground.output.entries] == [
            READY_MESSAGE.format(run="Ctrl+Enter"),
            CHECKING_MESSAGE,
        ]

    def test_restores_saved_session(self) -> None:
        storage = MemoryStorage()
        SessionStore(storage).save("x = 1", Dialect.UNTYPED)

        playground = launch(MemoryMount(), config=in_memory(), storage=storage)

        assert playground is not None
        assert playground.dialect is Dialect.UNTYPED
        assert playground.editor.get_value() == "x = 1"
        assert isinstance(playground.editor, BufferEditor)
        assert playground.editor.language == "python"

    def test_default_dialect_from_config(self) -> None:
        playground = launch(MemoryMount(), config=in_memory(default_dialect=Dialect.UNTYPED))

        assert playground is not None
        assert playground.editor.get_value() == EXAMPLES[Dialect.UNTYPED]

    def test_load_failure_shows_static_error(self) -> None:
        """A failure while loading leaves only an error message in the mount."""

        def broken_backend() -> TranspileBackend:
            raise RuntimeError("checker unavailable")

        mount = MemoryMount()
        playground = launch(mount, config=in_memory(), backend_factory=broken_backend)

        assert playground is None
        assert mount.error == "Error loading editor: checker unavailable"

    def test_editor_failure_is_reported(self) -> None:
        def broken_editor(text: str, language: str) -> BufferEditor:
            raise OSError("no display")

        mount = MemoryMount()
        assert launch(mount, config=in_memory(), editor_factory=broken_editor) is None
        assert mount.error == "Error loading editor: no display"

    def test_file_storage_persists_across_launches(self, tmp_path: Path) -> None:
        config = PlaygroundConfig(storage_path=tmp_path / "state" / "storage.json")

        first = launch(MemoryMount(), config=config)
        assert first is not None
        first.switch_dialect(Dialect.UNTYPED)
        first.editor.set_value("y = 2")

        second = launch(MemoryMount(), config=config)
        assert second is not None
        assert second.dialect is Dialect.UNTYPED
        assert second.editor.get_value() == "y = 2"

    def test_configured_keybindings_are_bound(self) -> None:
        config = in_memory(run_keybinding="F5", clear_keybinding="F6")
        playground = launch(MemoryMount(), config=config)
        assert playground is not None
        assert isinstance(playground.editor, BufferEditor)

        playground.editor.set_value("6 * 7")
        assert playground.editor.press("F5") is RunState.COMPLETED
        assert playground.output.entries[-1].rendered_text == "→ 42"

        playground.editor.press("F6")
        assert playground.output.entries == ()

    def test_ready_message_names_configured_key(self) -> None:
        playground = launch(MemoryMount(), config=in_memory(run_keybinding="F5", clear_keybinding="F6"))
        assert playground is not None
        assert playground.output.entries[0].rendered_text == READY_MESSAGE.format(run="F5")


class TestPlaygroundConfig:
    """Tests for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        config = PlaygroundConfig()
        assert config.default_dialect is Dialect.TYPED
        assert config.run_keybinding != config.clear_keybinding

    @pytest.mark.parametrize(
        "overrides",
        [
            {"default_dialect": "typescript"},
            {"run_keybinding": ""},
            {"run_keybinding": "Ctrl+L", "clear_keybinding": "Ctrl+L"},
        ],
    )
    def test_invalid_values_are_rejected(self, overrides: dict[str, Any]) -> None:
        with pytest.raises(ConfigurationError):
            PlaygroundConfig(**overrides)

    def test_unsupported_target_version(self) -> None:
        with pytest.raises(ConfigurationError):
            PlaygroundConfig(compiler=CompilerOptions(target_version="2.7"))


class TestRunSnippet:
    """Tests for one-shot runs."""

    def test_expression_result(self) -> None:
        report = run_snippet("1 + 1")
        assert report.success
        assert report.transcript() == "result: → 2"

    def test_runtime_error_report(self) -> None:
        report = run_snippet("console.log('before')\nraise ValueError('bad input')", Dialect.UNTYPED)

        assert not report.success
        assert report.state is RunState.THREW
        assert report.transcript() == "log: before\nerror: Runtime Error: bad input"

    def test_compile_failure_report(self) -> None:
        report = run_snippet("def f(x):\n    return x\n", Dialect.TYPED)

        assert report.state is RunState.COMPILE_FAILED
        assert report.transcript().startswith("error: Compilation Error: 1:")

    def test_runs_are_isolated(self) -> None:
        run_snippet("shared = 1", Dialect.UNTYPED)
        report = run_snippet("shared", Dialect.UNTYPED)
        assert report.state is RunState.THREW
