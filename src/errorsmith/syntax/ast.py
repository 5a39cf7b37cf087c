"""Go AST node definitions consumed by the rewriter.

Only the shapes the guard matcher inspects are modelled precisely:
blocks, if statements, binary expressions, identifiers and the nil
literal. Every other Go construct lowers to Opaque, which keeps its
concrete kind, its span and its lowered children so traversal can
recurse uniformly and still find if statements nested in closures,
switch cases, select clauses and the like.

All nodes are frozen. Rewrites produce new nodes with dataclasses.replace()
rather than mutating a node other code may still reference.

Python 3.13+.
"""

from dataclasses import dataclass
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Expressions
    "Identifier",
    "NilLiteral",
    "BinaryExpression",
    # Statements
    "Block",
    "IfStatement",
    # File structure
    "PackageClause",
    "SourceFile",
    # Everything else
    "Opaque",
    # Type aliases
    "Statement",
    "Alternative",
    "ASTNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Byte span in the original source.

    Attributes:
        start: Starting byte offset (inclusive)
        end: Ending byte offset (exclusive)

    Example:
        Source: "if err != nil {}"
        IfStatement span: Span(start=0, end=16)
        Identifier "err" span: Span(start=3, end=6)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Go identifier, e.g. err, ok, x."""

    name: str
    span: Span

    @staticmethod
    def guard(node: object) -> TypeIs["Identifier"]:
        """Type guard for Identifier."""
        return isinstance(node, Identifier)


@dataclass(frozen=True, slots=True)
class NilLiteral:
    """The predeclared nil value."""

    span: Span


@dataclass(frozen=True, slots=True)
class BinaryExpression:
    """Equality comparison: left operator right.

    Only == and != lower to this node. Other operators lower to an Opaque
    "binary_expression" holding the flattened operand chain.

    Example:
        err != nil
    """

    left: "ASTNode"
    operator: str
    right: "ASTNode"
    span: Span


# ============================================================================
# STATEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Block:
    """Braced statement list.

    Attributes:
        statements: Lowered statements in source order
        span: From the opening brace to just past the closing brace.
            For a synthetic block the start is just after the 'else'
            keyword where the rewriter inserts its own brace.
        synthetic: True when the rewriter created the block to host an
            else-if chain; no braces exist for it in the original source.
    """

    statements: tuple["ASTNode", ...]
    span: Span
    synthetic: bool = False


@dataclass(frozen=True, slots=True)
class IfStatement:
    """if [initializer;] condition body [else alternative]

    Field order is source order, so generic traversal visits the
    initializer, then the condition, then the body, then the else branch.

    Examples:
        if err != nil { return err }
        if v, err := f(); err != nil { ... } else if v == 0 { ... }
    """

    initializer: "ASTNode | None"
    condition: "ASTNode"
    body: Block
    alternative: "Alternative | None"
    span: Span

    @staticmethod
    def guard(node: object) -> TypeIs["IfStatement"]:
        """Type guard for IfStatement (used for else-if detection)."""
        return isinstance(node, IfStatement)


# ============================================================================
# FILE STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class PackageClause:
    """package name"""

    name: str
    span: Span


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Root node: package clause followed by top-level declarations."""

    package: PackageClause | None
    declarations: tuple["ASTNode", ...]
    span: Span


@dataclass(frozen=True, slots=True)
class Opaque:
    """Any Go construct the matcher does not inspect.

    Attributes:
        kind: Concrete grammar node type (e.g. "function_declaration")
        children: Lowered named children in source order
        span: Byte span of the construct
    """

    kind: str
    children: tuple["ASTNode", ...]
    span: Span


# ============================================================================
# TYPE ALIASES
# ============================================================================

# An else branch may be an opaque node only for grammars the rewriter does
# not support; the normalizer rejects that shape.
type Alternative = Block | IfStatement | Opaque
type Statement = IfStatement | Block | Opaque

type ASTNode = (
    SourceFile
    | PackageClause
    | Block
    | IfStatement
    | BinaryExpression
    | Identifier
    | NilLiteral
    | Opaque
)
