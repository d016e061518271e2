"""
Abstract base class for execution sandboxes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyplayground._types import ExecutionResult
    from pyplayground.sandbox._console import SandboxConsole


class Sandbox(ABC):
    """
    Abstract base for all sandbox implementations.

    A sandbox runs executable text exactly once and reports the outcome.
    It is not a security boundary: executed code has the same privileges
    as the host.
    """

    @abstractmethod
    def execute(self, executable_text: str, console: SandboxConsole) -> ExecutionResult:
        """
        Run executable text with ``console`` as its only injected name.

        Args:
            executable_text: Plain (untyped) source to run.
            console: Capability bound to the output sink for this run.

        Returns:
            ExecutionResult with the completion value or the caught error.
            Must never raise for errors caused by the executed code.
        """
        ...
