"""
Annotation erasure for typed source.

Once the checker has accepted a buffer, annotations carry no runtime meaning
for the playground, so they are removed before execution. Class-body
annotations are the exception: dataclasses and NamedTuples read them to
discover fields, so they are kept as written.
"""

from __future__ import annotations

import ast

# Statements whose ``body`` may not be empty.
_BLOCK_NODES = (ast.stmt, ast.ExceptHandler, ast.match_case)


class AnnotationStripper(ast.NodeTransformer):
    """Remove type annotations from a module tree in place."""

    def __init__(self) -> None:
        self._class_fields: set[int] = set()

    def visit_ClassDef(self, node: ast.ClassDef) -> ast.AST:
        for stmt in node.body:
            if isinstance(stmt, ast.AnnAssign):
                self._class_fields.add(id(stmt))
        if hasattr(node, "type_params"):
            node.type_params = []
        return self._visit_block(node)

    def visit_FunctionDef(self, node: ast.FunctionDef) -> ast.AST:
        return self._visit_function(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> ast.AST:
        return self._visit_function(node)

    def visit_arg(self, node: ast.arg) -> ast.AST:
        node.annotation = None
        return node

    def visit_AnnAssign(self, node: ast.AnnAssign) -> ast.AST | None:
        if id(node) in self._class_fields:
            self.generic_visit(node)
            return node
        if node.value is None:
            return None
        assign = ast.Assign(targets=[node.target], value=self.visit(node.value))
        return ast.copy_location(assign, node)

    def visit_TypeAlias(self, node: ast.AST) -> None:
        return None

    def generic_visit(self, node: ast.AST) -> ast.AST:
        return self._visit_block(node)

    def _visit_function(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> ast.AST:
        node.returns = None
        if hasattr(node, "type_params"):
            node.type_params = []
        return self._visit_block(node)

    def _visit_block(self, node: ast.AST) -> ast.AST:
        super().generic_visit(node)
        if isinstance(node, _BLOCK_NODES) and getattr(node, "body", None) == []:
            node.body = [ast.copy_location(ast.Pass(), node)]
        return node


def strip_annotations(source: str) -> str:
    """
    Return ``source`` with its type annotations erased.

    Raises:
        SyntaxError: If the source cannot be parsed by the running interpreter.
    """
    tree = ast.parse(source, mode="exec")
    tree = AnnotationStripper().visit(tree)
    ast.fix_missing_locations(tree)
    return ast.unparse(tree)
