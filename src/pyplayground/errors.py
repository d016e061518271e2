"""
Exception hierarchy for pyplayground.

Expected run failures (compile diagnostics, exceptions raised by user code)
are reported as result values, never as these exceptions.
"""

from __future__ import annotations


class PlaygroundError(Exception):
    """Base class for all pyplayground errors."""


class ConfigurationError(PlaygroundError):
    """Raised when a configuration value is invalid."""


class DependencyError(PlaygroundError):
    """Raised when a required backend library cannot be loaded."""
