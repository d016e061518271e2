"""Tests for the compiler adapter, backend and annotation erasure."""

from __future__ import annotations

import pytest

from pyplayground import (
    CompileFailure,
    CompileSuccess,
    Compiler,
    CompilerOptions,
    Diagnostic,
    Dialect,
    TranspileBackend,
)
from pyplayground.compiler import TranspileOutput, strip_annotations
from pyplayground.compiler.mypy_backend import MypyBackend
from pyplayground.session.examples import TYPED_EXAMPLE


class RecordingBackend(TranspileBackend):
    """Backend returning canned output and remembering its calls."""

    def __init__(self, output: TranspileOutput) -> None:
        self.output = output
        self.calls: list[tuple[str, CompilerOptions]] = []

    def transpile(self, text: str, options: CompilerOptions) -> TranspileOutput:
        self.calls.append((text, options))
        return self.output


class TestCompilerAdapter:
    """Tests for Compiler.compile semantics, independent of mypy."""

    def test_untyped_is_passed_through(self) -> None:
        """Untyped source should come back unchanged, even when invalid."""
        backend = RecordingBackend(TranspileOutput(text="unused"))
        compiler = Compiler(backend)

        result = compiler.compile("def broken(:", Dialect.UNTYPED)

        assert result == CompileSuccess(executable_text="def broken(:")
        assert backend.calls == []

    def test_typed_uses_backend_text(self) -> None:
        """Typed source should compile to the backend's emitted text."""
        backend = RecordingBackend(TranspileOutput(text="x = 1"))
        compiler = Compiler(backend)

        result = compiler.compile("x: int = 1", Dialect.TYPED)

        assert result == CompileSuccess(executable_text="x = 1")
        assert backend.calls == [("x: int = 1", CompilerOptions())]

    def test_typed_reports_first_diagnostic_only(self) -> None:
        """A failed compile should carry exactly the first diagnostic."""
        backend = RecordingBackend(
            TranspileOutput(
                text="",
                diagnostics=[
                    Diagnostic(2, 5, "first problem", "misc"),
                    Diagnostic(7, 1, "second problem"),
                ],
            )
        )
        result = Compiler(backend).compile("...", Dialect.TYPED)

        assert isinstance(result, CompileFailure)
        assert result.diagnostic == "2:5: first problem [misc]"

    def test_recompiles_every_time(self) -> None:
        """Nothing should be cached between compiles."""
        backend = RecordingBackend(TranspileOutput(text="pass"))
        compiler = Compiler(backend)

        compiler.compile("pass", Dialect.TYPED)
        compiler.compile("pass", Dialect.TYPED)

        assert len(backend.calls) == 2

    def test_options_are_forwarded(self) -> None:
        """Configured options should reach the backend."""
        backend = RecordingBackend(TranspileOutput(text="pass"))
        options = CompilerOptions(target_version="3.12")

        Compiler(backend, options=options).compile("pass", Dialect.TYPED)

        assert backend.calls[0][1].target_version == "3.12"


class TestDiagnostic:
    """Tests for Diagnostic rendering."""

    def test_str_with_position_and_code(self) -> None:
        assert str(Diagnostic(3, 9, "bad", "assignment")) == "3:9: bad [assignment]"

    def test_str_without_position(self) -> None:
        """Positionless diagnostics should render the message alone."""
        assert str(Diagnostic(0, 0, "mypy crashed")) == "mypy crashed"


class TestStripAnnotations:
    """Tests for annotation erasure."""

    def test_removes_signature_annotations(self) -> None:
        out = strip_annotations("def add(a: int, *rest: int, flag: bool = False) -> int:\n    return a\n")
        assert out == "def add(a, *rest, flag=False):\n    return a"

    def test_annotated_assignment_becomes_assignment(self) -> None:
        assert strip_annotations("x: int = 1") == "x = 1"

    def test_bare_declaration_is_dropped(self) -> None:
        assert strip_annotations("x: int\ny = 2") == "y = 2"

    def test_emptied_body_gets_pass(self) -> None:
        """A block left empty by erasure should still be valid Python."""
        out = strip_annotations("def f() -> None:\n    x: int\n")
        assert out == "def f():\n    pass"

    def test_class_fields_are_kept(self) -> None:
        """Dataclass fields must survive erasure."""
        out = strip_annotations(
            "@dataclass\nclass User:\n    name: str\n    tags: list[str] = field(default_factory=list)\n"
        )
        assert "name: str" in out
        assert "tags: list[str] = field(default_factory=list)" in out

    def test_methods_inside_classes_are_stripped(self) -> None:
        out = strip_annotations("class A:\n    def f(self, x: int) -> str:\n        y: str = 'a'\n        return y\n")
        assert "def f(self, x):" in out
        assert "y = 'a'" in out

    def test_async_functions_are_stripped(self) -> None:
        out = strip_annotations("async def f(x: int) -> int:\n    return x\n")
        assert out == "async def f(x):\n    return x"

    def test_invalid_source_raises(self) -> None:
        with pytest.raises(SyntaxError):
            strip_annotations("def f(:")


class TestMypyBackend:
    """Tests for the mypy-backed typed dialect."""

    @pytest.fixture
    def compiler(self) -> Compiler:
        return Compiler(MypyBackend())

    def test_type_error_fails(self, compiler: Compiler) -> None:
        """A type error should fail with mypy's message, positioned in the buffer."""
        result = compiler.compile('x: int = "bad"\n', Dialect.TYPED)

        assert isinstance(result, CompileFailure)
        assert "Incompatible types in assignment" in result.diagnostic
        assert result.diagnostic.startswith("1:")

    def test_line_numbers_are_relative_to_buffer(self, compiler: Compiler) -> None:
        result = compiler.compile('a = 1\nb = 2\nc: str = 3\n', Dialect.TYPED)

        assert isinstance(result, CompileFailure)
        assert result.diagnostic.startswith("3:")

    def test_syntax_error_fails(self, compiler: Compiler) -> None:
        result = compiler.compile("def broken(:\n    pass\n", Dialect.TYPED)

        assert isinstance(result, CompileFailure)

    def test_strict_mode_requires_annotations(self, compiler: Compiler) -> None:
        """Strict checking should reject unannotated functions."""
        result = compiler.compile("def f(x):\n    return x\n", Dialect.TYPED)

        assert isinstance(result, CompileFailure)
        assert "missing a type annotation" in result.diagnostic

    def test_console_is_declared(self, compiler: Compiler) -> None:
        """The injected console should be known to the checker."""
        result = compiler.compile('console.log("hi", 1)\nconsole.clear()\n', Dialect.TYPED)

        assert result == CompileSuccess(executable_text="console.log('hi', 1)\nconsole.clear()")

    def test_unknown_console_method_fails(self, compiler: Compiler) -> None:
        """The checker should only know the narrow console surface."""
        result = compiler.compile('console.table([1])\n', Dialect.TYPED)

        assert isinstance(result, CompileFailure)

    def test_success_erases_annotations(self, compiler: Compiler) -> None:
        result = compiler.compile("def double(x: int) -> int:\n    return x * 2\n", Dialect.TYPED)

        assert result == CompileSuccess(executable_text="def double(x):\n    return x * 2")

    def test_typed_example_compiles(self, compiler: Compiler) -> None:
        assert isinstance(compiler.compile(TYPED_EXAMPLE, Dialect.TYPED), CompileSuccess)

    def test_no_emit_returns_empty_text(self) -> None:
        output = MypyBackend().transpile("x: int = 1\n", CompilerOptions(emit=False))

        assert output.diagnostics == []
        assert output.text == ""
