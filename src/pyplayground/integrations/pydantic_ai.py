"""
PydanticAI integration for pyplayground.

Provides helpers to create PydanticAI-compatible tools.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Awaitable, Callable

try:
    from pydantic_ai import RunContext
except ImportError:
    raise ImportError(
        "PydanticAI integration requires 'pydantic-ai'. "
        "Install with `pip install pyplayground[pydantic-ai]`"
    )

from pyplayground._types import Dialect
from pyplayground.api import run_snippet

if TYPE_CHECKING:
    from pyplayground.compiler import Compiler


def create_run_tool(
    dialect: Dialect = Dialect.UNTYPED,
    *,
    compiler: Compiler | None = None,
) -> Callable[[RunContext[Any], str], Awaitable[str]]:
    """
    Create a PydanticAI tool function that runs Python snippets.

    Example:
        >>> from pydantic_ai import Agent
        >>> run_tool = create_run_tool(Dialect.TYPED)
        >>> agent = Agent("openai:gpt-4o", tools=[run_tool])
    """

    async def run_python(
        ctx: RunContext[Any],
        source: str,
    ) -> str:
        """
        Run Python code and return what it logged.
        Use console.log(...) to print; a trailing expression is reported as the result.
        """
        report = await asyncio.to_thread(run_snippet, source, dialect, compiler=compiler)
        if not report.success:
            return f"Error:\n{report.transcript()}"
        return report.transcript() or "(no output)"

    return run_python
