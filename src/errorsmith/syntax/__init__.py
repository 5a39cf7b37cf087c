"""Go syntax package.

Provides the tree-sitter parser adapter, the lowered AST, the visitor base
class and byte-offset position helpers.

Python 3.13+.
"""

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
from .parser import GoParser
from .visitor import ASTVisitor

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "BinaryExpression",
    "Block",
    "GoParser",
    "Identifier",
    "IfStatement",
    "NilLiteral",
    "Opaque",
    "PackageClause",
    "SourceFile",
    "Span",
    "parse",
]


def parse(source: bytes, filename: str = "<source>") -> SourceFile:
    """Parse Go source into the lowered AST.

    Convenience function for GoParser().parse().

    Example:
        >>> from errorsmith.syntax import parse
        >>> tree = parse(b"package main\\n\\nfunc main() {}\\n")
        >>> tree.package.name
        'main'
    """
    return GoParser().parse(source, filename)
