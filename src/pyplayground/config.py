"""
Host configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pyplayground._types import Dialect
from pyplayground.compiler._base import CompilerOptions
from pyplayground.editor import CLEAR_KEYBINDING, RUN_KEYBINDING
from pyplayground.errors import ConfigurationError

DEFAULT_STORAGE_PATH = Path("~/.pyplayground/storage.json")


@dataclass(frozen=True)
class PlaygroundConfig:
    """Playground host configuration."""

    storage_path: Path | None = DEFAULT_STORAGE_PATH
    """JSON file for the session. None keeps the session in memory only."""

    default_dialect: Dialect = Dialect.TYPED
    """Dialect used when no session was saved."""

    run_keybinding: str = RUN_KEYBINDING
    clear_keybinding: str = CLEAR_KEYBINDING

    compiler: CompilerOptions = field(default_factory=CompilerOptions)

    def __post_init__(self) -> None:
        if not isinstance(self.default_dialect, Dialect):
            raise ConfigurationError(f"Unknown dialect: {self.default_dialect!r}")
        if not self.run_keybinding or not self.clear_keybinding:
            raise ConfigurationError("Keybindings must be non-empty")
        if self.run_keybinding == self.clear_keybinding:
            raise ConfigurationError(
                f"Run and clear cannot share the keybinding {self.run_keybinding!r}"
            )
        if not self.compiler.target_version.startswith("3."):
            raise ConfigurationError(
                f"Unsupported target version: {self.compiler.target_version!r}"
            )
