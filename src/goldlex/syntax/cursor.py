"""Read position over a gold expression.

A Cursor never changes; moving produces a new Cursor. Scanners hold the
cursor they started from, so a failed scan costs nothing to undo: the
caller simply keeps its old cursor.

End of input is reported by ``is_eof``. Reading ``current`` at the end
raises EOFError instead of returning a sentinel.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable (source, pos) pair.

    Example:
        >>> start = Cursor("12g", 0)
        >>> start.take_while("0123456789").current
        'g'
        >>> start.pos
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: At end of input
        """
        if self.is_eof:
            msg = f"No character at position {self.pos}; end of input"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character ``offset`` places ahead, or None past the end."""
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        """Move forward, stopping at end of input."""
        return Cursor(self.source, min(len(self.source), self.pos + count))

    def take_while(self, chars: str) -> "Cursor":
        """Move past every consecutive character found in ``chars``."""
        end = self.pos
        while end < len(self.source) and self.source[end] in chars:
            end += 1
        return Cursor(self.source, end)

    def text_until(self, end: "Cursor") -> str:
        """Source text between this cursor and ``end``."""
        return self.source[self.pos : end.pos]

    def skip_spaces(self) -> "Cursor":
        """Move past U+0020 spaces; tabs and newlines are not separators."""
        return self.take_while(" ")

    def expect(self, chars: str) -> "Cursor | None":
        """Consume one character from ``chars``, ignoring ASCII case.

        ``chars`` must be lowercase. Non-ASCII characters never match, so
        case folding cannot map e.g. the Kelvin sign onto 'k'.

        Returns:
            Cursor one character further on a match, otherwise None

        Example:
            >>> Cursor("G", 0).expect("gkmb").pos
            1
            >>> Cursor("x", 0).expect("gkmb") is None
            True
        """
        char = self.peek()
        if char is not None and char.isascii() and char.lower() in chars:
            return self.advance()
        return None


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """A scanned value and the cursor just past it.

    Example:
        >>> scanned = ParseResult("12", Cursor("12s", 2))
        >>> scanned.cursor.current
        's'
    """

    value: T
    cursor: Cursor
