"""Position utilities for Go source buffers.

Converts byte offsets to line/column positions for template line numbers,
diagnostics and error context. All offsets are byte offsets into the
original, unedited source.
"""

from errorsmith.diagnostics import SourceSpan


def line_offset(source: bytes, pos: int) -> int:
    """Get 0-based line number from byte offset.

    Args:
        source: Complete Go source
        pos: Byte offset in source

    Returns:
        0-based line number

    Example:
        >>> source = b"line1\\nline2\\nline3"
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 6)
        1
        >>> line_offset(source, 12)
        2
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))  # Clamp to source length

    return source.count(b"\n", 0, pos)


def column_offset(source: bytes, pos: int) -> int:
    """Get 0-based column (in bytes) from byte offset.

    Example:
        >>> source = b"hello\\nworld"
        >>> column_offset(source, 2)
        2
        >>> column_offset(source, 6)
        0
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    line_start = source.rfind(b"\n", 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


def line_number(source: bytes, pos: int) -> int:
    """1-based line number, as Go tools report it."""
    return line_offset(source, pos) + 1


def source_span(source: bytes, start: int, end: int) -> SourceSpan:
    """Build a 1-indexed SourceSpan for diagnostics.

    Args:
        source: Complete Go source
        start: Starting byte offset
        end: Ending byte offset (exclusive)

    Returns:
        SourceSpan with line and column of start
    """
    return SourceSpan(
        start=start,
        end=max(start, end),
        line=line_offset(source, start) + 1,
        column=column_offset(source, start) + 1,
    )


def get_error_context(source: bytes, pos: int, context_lines: int = 2, marker: str = "^") -> str:
    """Get formatted error context showing position in source.

    Lines are decoded as UTF-8 with replacement, so the marker column is
    exact for ASCII lines only.

    Example:
        >>> source = b"line1\\nline2\\nerror here\\nline4\\nline5"
        >>> print(get_error_context(source, 12, context_lines=1))
        line2
        error here
        ^
        line4
    """
    line_num = line_offset(source, pos)
    col_num = column_offset(source, pos)

    lines = source.decode("utf-8", errors="replace").splitlines(keepends=False)

    start_line = max(0, line_num - context_lines)
    end_line = min(len(lines), line_num + context_lines + 1)

    context = []
    for i in range(start_line, end_line):
        context.append(lines[i])
        if i == line_num:
            context.append(" " * col_num + marker)

    return "\n".join(context)
