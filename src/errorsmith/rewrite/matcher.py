"""Guard matcher.

Walks the lowered Go AST and schedules an injection block in front of
every guard statement:

    if err != nil { ... }
    if err == nil { ... }

A guard has no initializer and a condition that is exactly the reserved
error identifier compared with nil. Reversed operands, parenthesized
conditions and other identifiers are deliberately not matched.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from errorsmith.constants import ERROR_IDENTIFIER, GUARD_OPERATORS
from errorsmith.syntax.ast import (
    ASTNode,
    BinaryExpression,
    Identifier,
    IfStatement,
    NilLiteral,
)
from errorsmith.syntax.position import line_number
from errorsmith.syntax.visitor import ASTVisitor

from .buffer import EditBuffer
from .locator import TextLocator
from .normalizer import ElseChainNormalizer
from .templates import InjectionTemplate

__all__ = ["GuardInjector", "InjectionSite", "is_guard"]

logger = logging.getLogger(__name__)


def is_guard(node: IfStatement) -> bool:
    """Check whether an if statement has the guard shape.

    Example:
        if err != nil      -> True
        if err == nil      -> True
        if nil != err      -> False
        if e != nil        -> False
        if err := f(); err != nil -> False (initializer)
    """
    if node.initializer is not None:
        return False
    condition = node.condition
    return (
        isinstance(condition, BinaryExpression)
        and condition.operator in GUARD_OPERATORS
        and Identifier.guard(condition.left)
        and condition.left.name == ERROR_IDENTIFIER
        and isinstance(condition.right, NilLiteral)
    )


@dataclass(frozen=True, slots=True)
class InjectionSite:
    """One instrumented guard.

    Attributes:
        position: Byte offset of the guard in the original source
        line: 1-based line of the guard
        operator: "==" or "!="
    """

    position: int
    line: int
    operator: str


class GuardInjector(ASTVisitor):
    """Pre-order visitor that instruments guards.

    For every IfStatement:
        1. With an initializer: visit it, never inject.
        2. Without one and with a guard condition: insert the rendered
           template at the statement start.
        3. Visit the condition and the body.
        4. Normalize an else-if alternative into a synthetic block and
           visit the alternative.

    Example:
        >>> buffer = EditBuffer(source)
        >>> injector = GuardInjector(buffer, "main.go", InjectionTemplate(20))
        >>> injector.visit(parse(source))
        >>> len(injector.sites)
        1
    """

    __slots__ = ("_buffer", "_filename", "_normalizer", "_sites", "_template")

    def __init__(
        self,
        buffer: EditBuffer,
        filename: str,
        template: InjectionTemplate,
        *,
        max_depth: int | None = None,
    ) -> None:
        super().__init__(max_depth=max_depth)
        self._buffer = buffer
        self._filename = filename
        self._template = template
        self._normalizer = ElseChainNormalizer(buffer, TextLocator(buffer.original))
        self._sites: list[InjectionSite] = []

    @property
    def sites(self) -> tuple[InjectionSite, ...]:
        """Guards instrumented so far, in source order."""
        return tuple(self._sites)

    def visit_IfStatement(self, node: IfStatement) -> ASTNode:
        with self._depth_guard:
            if node.initializer is not None:
                self.visit(node.initializer)
            elif is_guard(node):
                self._inject(node)

            self.visit(node.condition)
            self.visit(node.body)

            if node.alternative is not None:
                normalized = self._normalizer.normalize(node)
                self.visit(normalized.alternative)  # type: ignore[arg-type]
        return node

    def _inject(self, node: IfStatement) -> None:
        position = node.span.start
        line = line_number(self._buffer.original, position)
        self._buffer.insert(position, self._template.render(self._filename, line))

        operator = node.condition.operator  # type: ignore[union-attr]
        self._sites.append(InjectionSite(position=position, line=line, operator=operator))
        logger.debug("Injected fault before guard at %s:%d (err %s nil)", self._filename, line, operator)
