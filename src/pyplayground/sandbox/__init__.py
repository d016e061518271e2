"""
Execution sandboxes.
"""

from pyplayground.sandbox._base import Sandbox
from pyplayground.sandbox._console import SandboxConsole
from pyplayground.sandbox.local import ScopedSandbox

__all__ = [
    "Sandbox",
    "SandboxConsole",
    "ScopedSandbox",
]
