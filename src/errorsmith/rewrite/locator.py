"""Comment-aware keyword search over the original source.

Locates syntactic landmarks the lowered tree does not expose, such as the
'else' keyword between an if body and its alternative.

Limitation: quoted string, raw string and rune literals are NOT skipped.
Callers must only search regions where no literal can precede the
keyword (between a closing brace and 'else' only whitespace and comments
can appear).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from errorsmith.diagnostics import ErrorTemplate, StructuralAssumptionError

__all__ = ["NOT_FOUND", "TextLocator"]

NOT_FOUND = -1


class TextLocator:
    """Scan forward through source bytes, skipping // and /* */ comments.

    Example:
        >>> locator = TextLocator(b"} /* else */ // else\\n else {")
        >>> locator.find(0, "else")
        22
    """

    __slots__ = ("_source",)

    def __init__(self, source: bytes) -> None:
        self._source = source

    def find(self, start: int, keyword: str | bytes) -> int:
        """Find keyword at or after start, outside comments.

        Args:
            start: Byte offset where the scan begins
            keyword: Literal to match

        Returns:
            Byte offset of the match, or NOT_FOUND if the end of the buffer
            (or an unterminated block comment) is reached first
        """
        needle = keyword.encode("utf-8") if isinstance(keyword, str) else keyword
        source = self._source
        size = len(source)
        i = max(start, 0)

        while i < size:
            if source.startswith(needle, i):
                return i
            if source.startswith(b"//", i):
                newline = source.find(b"\n", i + 2)
                if newline == -1:
                    return NOT_FOUND
                i = newline
                continue
            if source.startswith(b"/*", i):
                close = source.find(b"*/", i + 2)
                if close == -1:
                    return NOT_FOUND
                i = close + 2
                continue
            i += 1

        return NOT_FOUND

    def require(self, start: int, keyword: str) -> int:
        """Find keyword or raise.

        Args:
            start: Byte offset where the scan begins
            keyword: Literal that is structurally guaranteed to exist

        Returns:
            Byte offset of the match

        Raises:
            StructuralAssumptionError: If the keyword is not found
        """
        offset = self.find(start, keyword)
        if offset == NOT_FOUND:
            raise StructuralAssumptionError(
                ErrorTemplate.keyword_not_found(keyword, start),
                position=start,
                keyword=keyword,
            )
        return offset
