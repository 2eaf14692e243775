from __future__ import annotations

# C locale isspace(); str.isspace() would also accept Unicode separators
WHITESPACE = frozenset(" \t\n\v\f\r")
DIGITS = frozenset("0123456789")


class Cursor:
    """A read position inside one line of input.

    The reader advances the cursor past whatever it consumes, so after a
    successful parse `rest()` is the text that has not been read yet.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Character at pos + offset, or '' past the end."""
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else ""

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def rest(self) -> str:
        return self.text[self.pos:]

    def __repr__(self):
        return f"Cursor(pos={self.pos}, rest={self.rest()!r})"
