"""
Abstract base class for compiler backends.

A backend checks typed source and produces executable text
(the default is the mypy backend).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyplayground._types import Diagnostic


@dataclass(frozen=True)
class CompilerOptions:
    """Fixed options handed to the backend on every transpile."""

    target_version: str = "3.11"
    strict: bool = True
    emit: bool = True


@dataclass(frozen=True)
class TranspileOutput:
    """Raw backend output: emitted text plus every diagnostic, in report order."""

    text: str
    diagnostics: list[Diagnostic] = field(default_factory=list)


class TranspileBackend(ABC):
    """
    Abstract base for all compiler backends.

    Backends must not cache anything between calls: each transpile
    starts from the text it is given.
    """

    @abstractmethod
    def transpile(self, text: str, options: CompilerOptions) -> TranspileOutput:
        """
        Check and down-level typed source.

        Args:
            text: The typed source text.
            options: Target and checking options.

        Returns:
            TranspileOutput with the executable text and diagnostics.
            When diagnostics is non-empty, text must not be executed.
        """
        ...
