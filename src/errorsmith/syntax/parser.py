"""Go parser adapter.

Parses Go source with tree-sitter and lowers the concrete syntax tree into
the frozen dataclass AST in errorsmith.syntax.ast.

tree-sitter recovers from syntax errors by inserting ERROR and MISSING
nodes. The rewriter needs a faithful tree, so any recovery turns into a
GoSyntaxError pointing at the first damaged node.

Lowering rules:
    if_statement        -> IfStatement (fields: initializer, condition,
                           consequence, alternative)
    block               -> Block (statement_list wrappers flattened)
    binary_expression   -> BinaryExpression for == and !=; any other operator
                           -> Opaque whose children are the operands of the
                           whole left-nested chain (a + b + c + ...)
    identifier          -> Identifier
    nil                 -> NilLiteral
    package_clause      -> PackageClause
    anything else       -> Opaque(kind, lowered named children)

Python 3.13+.
"""

from __future__ import annotations

import logging

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from errorsmith.constants import GUARD_OPERATORS, MAX_DEPTH
from errorsmith.core.depth_guard import DepthGuard
from errorsmith.diagnostics import ErrorTemplate, GoSyntaxError, StructuralAssumptionError

from .ast import (
    ASTNode,
    BinaryExpression,
    Block,
    Identifier,
    IfStatement,
    NilLiteral,
    Opaque,
    PackageClause,
    SourceFile,
    Span,
)
from .position import get_error_context, source_span

__all__ = ["GO_LANGUAGE", "GoParser"]

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())


def _span(node: Node) -> Span:
    return Span(start=node.start_byte, end=node.end_byte)


def _first_error(root: Node) -> Node | None:
    """Find the first ERROR or MISSING node in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            # Reverse so the leftmost child is popped first
            stack.extend(reversed(node.children))
    return None


class GoParser:
    """Parse Go source bytes into a lowered SourceFile.

    Example:
        >>> parser = GoParser()
        >>> tree = parser.parse(b"package main\\n", "main.go")
        >>> tree.package.name
        'main'
    """

    __slots__ = ("_max_depth", "_parser")

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize parser.

        Args:
            max_depth: Maximum lowering depth (default: MAX_DEPTH)
        """
        self._parser = Parser(GO_LANGUAGE)
        self._max_depth = max_depth if max_depth is not None else MAX_DEPTH

    def parse(self, source: bytes, filename: str = "<source>") -> SourceFile:
        """Parse and lower a Go source file.

        Args:
            source: Raw source bytes
            filename: Name used in diagnostics

        Returns:
            Lowered SourceFile

        Raises:
            GoSyntaxError: If tree-sitter had to recover from an error
            DepthLimitExceededError: If nesting exceeds max_depth
        """
        tree = self._parser.parse(source)
        root = tree.root_node

        if root.has_error:
            bad = _first_error(root) or root
            kind = bad.type if bad.is_missing else "ERROR"
            logger.debug(
                "Parse error in %s at byte %d (%s):\n%s",
                filename,
                bad.start_byte,
                kind,
                get_error_context(source, bad.start_byte),
            )
            raise GoSyntaxError(
                ErrorTemplate.source_syntax_error(
                    filename, source_span(source, bad.start_byte, bad.end_byte), kind
                )
            )

        return _Lowering(source, DepthGuard(max_depth=self._max_depth)).source_file(root)


class _Lowering:
    """Single-use converter from tree-sitter nodes to AST dataclasses."""

    __slots__ = ("_guard", "_source")

    def __init__(self, source: bytes, guard: DepthGuard) -> None:
        self._source = source
        self._guard = guard

    def _text(self, node: Node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def source_file(self, root: Node) -> SourceFile:
        package: PackageClause | None = None
        declarations: list[ASTNode] = []
        for child in root.named_children:
            if child.type == "package_clause":
                name = next(
                    (c for c in child.named_children if c.type == "package_identifier"),
                    None,
                )
                package = PackageClause(
                    name=self._text(name) if name is not None else "",
                    span=_span(child),
                )
            else:
                declarations.append(self.lower(child))
        return SourceFile(package=package, declarations=tuple(declarations), span=_span(root))

    def lower(self, node: Node) -> ASTNode:
        with self._guard:
            match node.type:
                case "if_statement":
                    return self._if_statement(node)
                case "block":
                    return self._block(node)
                case "binary_expression":
                    return self._binary_expression(node)
                case "identifier":
                    return Identifier(name=self._text(node), span=_span(node))
                case "nil":
                    return NilLiteral(span=_span(node))
                case _:
                    return Opaque(
                        kind=node.type,
                        children=tuple(self.lower(c) for c in node.named_children),
                        span=_span(node),
                    )

    def _block(self, node: Node) -> Block:
        statements: list[ASTNode] = []
        for child in node.named_children:
            # Newer grammars wrap block contents in a statement_list node
            if child.type == "statement_list":
                statements.extend(self.lower(c) for c in child.named_children)
            else:
                statements.append(self.lower(child))
        return Block(statements=tuple(statements), span=_span(node))

    def _required(self, node: Node, field_name: str) -> Node:
        child = node.child_by_field_name(field_name)
        if child is None:
            # Grammar guarantees the field; an error-free tree always has it
            raise StructuralAssumptionError(
                ErrorTemplate.keyword_not_found(field_name, node.start_byte),
                position=node.start_byte,
                keyword=field_name,
            )
        return child

    def _if_statement(self, node: Node) -> IfStatement:
        initializer = node.child_by_field_name("initializer")
        alternative = node.child_by_field_name("alternative")

        with self._guard:
            body = self._block(self._required(node, "consequence"))

        return IfStatement(
            initializer=self.lower(initializer) if initializer is not None else None,
            condition=self.lower(self._required(node, "condition")),
            body=body,
            alternative=self.lower(alternative) if alternative is not None else None,  # type: ignore[arg-type]
            span=_span(node),
        )

    def _binary_expression(self, node: Node) -> ASTNode:
        operator = self._text(self._required(node, "operator"))
        if operator not in GUARD_OPERATORS:
            return self._operand_chain(node)
        return BinaryExpression(
            left=self.lower(self._required(node, "left")),
            operator=operator,
            right=self.lower(self._required(node, "right")),
            span=_span(node),
        )

    def _is_chain_link(self, node: Node) -> bool:
        return (
            node.type == "binary_expression"
            and self._text(self._required(node, "operator")) not in GUARD_OPERATORS
        )

    def _operand_chain(self, node: Node) -> Opaque:
        """Lower a left-nested operator chain as one flat node.

        tree-sitter nests one binary_expression per operator. The chain is
        walked iteratively, so its length does not count against the depth
        limit; only each operand does.
        """
        operands: list[Node] = []
        link = node
        while self._is_chain_link(link):
            operands.append(self._required(link, "right"))
            link = self._required(link, "left")
        operands.append(link)
        operands.reverse()
        return Opaque(
            kind="binary_expression",
            children=tuple(self.lower(operand) for operand in operands),
            span=_span(node),
        )
