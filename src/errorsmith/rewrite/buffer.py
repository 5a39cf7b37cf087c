"""Positional edit buffer.

Accumulates insertions against byte offsets in an immutable original
buffer and materializes the edited bytes on demand. Offsets always refer
to the ORIGINAL source, so recording one edit never shifts the offsets of
later ones.

Insertion-only: original bytes are never deleted or overwritten.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Edit", "EditBuffer"]


@dataclass(frozen=True, slots=True)
class Edit:
    """Insert text immediately before the byte at position.

    Attributes:
        position: Byte offset in the original source (0 <= position <= len)
        text: Bytes to insert
        sequence: Recording order, used to order edits at equal positions
    """

    position: int
    text: bytes
    sequence: int


class EditBuffer:
    """Append-only ledger of insertions over an original byte sequence.

    Edits may be recorded in any position order. Materialization sorts them
    by position; edits sharing a position keep the order they were recorded
    in (first recorded appears first).

    Example:
        >>> buffer = EditBuffer(b"if x {}")
        >>> _ = buffer.insert(0, "// a\\n")
        >>> _ = buffer.insert(7, "\\n")
        >>> buffer.materialize()
        b'// a\\nif x {}\\n'
    """

    __slots__ = ("_edits", "_original")

    def __init__(self, original: bytes) -> None:
        self._original = bytes(original)
        self._edits: list[Edit] = []

    @property
    def original(self) -> bytes:
        """The unedited source."""
        return self._original

    @property
    def edits(self) -> tuple[Edit, ...]:
        """Snapshot of recorded edits in recording order."""
        return tuple(self._edits)

    def __len__(self) -> int:
        return len(self._edits)

    def insert(self, position: int, text: str | bytes) -> Edit:
        """Record an insertion.

        Args:
            position: Byte offset in the original source
            text: Text to insert; str is encoded as UTF-8

        Returns:
            The recorded Edit

        Raises:
            ValueError: If position is outside [0, len(original)]
        """
        if not 0 <= position <= len(self._original):
            msg = f"Edit position {position} outside source of length {len(self._original)}"
            raise ValueError(msg)

        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        edit = Edit(position=position, text=data, sequence=len(self._edits))
        self._edits.append(edit)
        return edit

    def materialize(self) -> bytes:
        """Produce the edited bytes.

        Pure with respect to the buffer: calling it twice without new
        insertions yields identical output.

        Returns:
            Original bytes with every edit applied
        """
        # sorted() is stable, so ties keep recording order
        ordered = sorted(self._edits, key=lambda edit: edit.position)

        parts: list[bytes] = []
        cursor = 0
        for edit in ordered:
            parts.append(self._original[cursor : edit.position])
            parts.append(edit.text)
            cursor = edit.position
        parts.append(self._original[cursor:])
        return b"".join(parts)
