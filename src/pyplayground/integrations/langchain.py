"""LangChain integration for pyplayground."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pyplayground._types import Dialect
from pyplayground.api import run_snippet

if TYPE_CHECKING:
    from pyplayground.compiler import Compiler

HAS_LANGCHAIN = False
_StructuredTool: Any = None

try:
    import langchain_core.tools

    _StructuredTool = langchain_core.tools.StructuredTool
    HAS_LANGCHAIN = True
except ImportError:
    pass


def create_langchain_tools(*, compiler: Compiler | None = None) -> dict[str, Any]:
    """
    Create LangChain tools that run Python snippets in a playground.

    Each call runs in a fresh, in-memory playground; nothing carries over
    between calls.

    Args:
        compiler: Compiler to use for every run. Defaults to a new Compiler.

    Returns:
        Dictionary of LangChain StructuredTool instances.

    Raises:
        ImportError: If langchain-core is not installed.

    Example:
        >>> tools = create_langchain_tools()
        >>> agent = create_react_agent(llm, list(tools.values()))
    """
    if not HAS_LANGCHAIN:
        raise ImportError(
            "LangChain integration requires langchain-core. "
            "Install with: pip install pyplayground[langchain]"
        )

    def run_python(source: str, typed: bool = False) -> str:
        """Run a Python snippet and return its captured output."""
        dialect = Dialect.TYPED if typed else Dialect.UNTYPED
        report = run_snippet(source, dialect, compiler=compiler)
        return report.transcript() or "(no output)"

    run_tool = _StructuredTool.from_function(
        func=run_python,
        name="run_python",
        description=(
            "Run Python code. Use console.log(...) to print; the value of a "
            "trailing expression is reported as the result. Set typed=true to "
            "type-check strictly before running."
        ),
    )

    return {"run_python": run_tool}
