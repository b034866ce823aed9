from __future__ import annotations


class SourceCursor:
    """Position over program text, tracking line and column (both 1-based)."""

    __slots__ = ("source", "pos", "line", "column")

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def peek(self) -> str:
        """Current character, or "" at end of input."""
        return self.source[self.pos] if self.pos < len(self.source) else ""

    def advance(self, count: int = 1) -> None:
        """Move forward `count` characters; stops at end of input."""
        end = min(self.pos + count, len(self.source))
        while self.pos < end:
            if self.source[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def remaining(self) -> str:
        return self.source[self.pos:]

    def slice(self, start: int, end: int | None = None) -> str:
        return self.source[start:end]

    def clone(self) -> SourceCursor:
        copy = SourceCursor(self.source)
        copy.pos = self.pos
        copy.line = self.line
        copy.column = self.column
        return copy

    def __repr__(self) -> str:
        return f"SourceCursor(pos={self.pos}, line={self.line}, column={self.column})"
