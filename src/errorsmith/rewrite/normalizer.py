"""Else-chain normalization.

In

    if a {
    } else if err != nil {
    }

the nested 'if' has no enclosing braces, so a statement injected in front
of it would have no block to live in. The normalizer rewrites the text to

    if a {
    } else {if err != nil {
    }}

and returns a matching AST in which the alternative is a synthetic Block
holding the nested if. The input node is never mutated; a new IfStatement
is returned.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from errorsmith.constants import ELSE_KEYWORD
from errorsmith.diagnostics import ErrorTemplate, StructuralAssumptionError
from errorsmith.syntax.ast import Block, IfStatement, Opaque, Span
from errorsmith.syntax.position import source_span

from .buffer import EditBuffer
from .locator import TextLocator

__all__ = ["ElseChainNormalizer"]

logger = logging.getLogger(__name__)


class ElseChainNormalizer:
    """Wrap else-if alternatives in explicit blocks.

    Records two edits per else-if: an opening brace right after the 'else'
    keyword and a closing brace at the end of the alternative.
    """

    __slots__ = ("_buffer", "_locator")

    def __init__(self, buffer: EditBuffer, locator: TextLocator | None = None) -> None:
        self._buffer = buffer
        self._locator = locator if locator is not None else TextLocator(buffer.original)

    def normalize(self, node: IfStatement) -> IfStatement:
        """Return node with an else-if alternative wrapped in a block.

        Args:
            node: If statement to normalize

        Returns:
            node itself when there is no alternative or it is already a
            block, otherwise a new IfStatement whose alternative is a
            synthetic Block

        Raises:
            StructuralAssumptionError: If the 'else' keyword cannot be found
                or the alternative is neither a block nor an if statement
        """
        alternative = node.alternative
        if alternative is None or isinstance(alternative, Block):
            return node

        if not IfStatement.guard(alternative):
            kind = alternative.kind if isinstance(alternative, Opaque) else type(alternative).__name__
            raise StructuralAssumptionError(
                ErrorTemplate.unexpected_alternative(
                    kind,
                    source_span(self._buffer.original, alternative.span.start, alternative.span.end),
                ),
                position=alternative.span.start,
            )

        else_offset = self._locator.require(node.body.span.end, ELSE_KEYWORD)
        open_at = else_offset + len(ELSE_KEYWORD)
        close_at = alternative.span.end

        self._buffer.insert(open_at, "{")
        self._buffer.insert(close_at, "}")
        logger.debug("Wrapped else-if at byte %d in a block ending at byte %d", open_at, close_at)

        block = Block(
            statements=(alternative,),
            span=Span(start=open_at, end=close_at),
            synthetic=True,
        )
        return replace(node, alternative=block)
