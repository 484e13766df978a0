"""Rewindable position over a piece of template text.

Positions count characters, not bytes, so lookahead works the same for
multi-byte text. Parsers save ``pos`` before an attempt and assign it back
when the attempt fails.
"""

from collections.abc import Callable


class Cursor:
    """Character index into a string with peek and conditional consumption."""

    def __init__(
        self, text: str, *, base: int = 0, template: str | None = None
    ) -> None:
        """Initialize the cursor.

        Args:
            text: Text to walk over.
            base: Offset of ``text`` inside the enclosing template, used to
                report error positions against the whole input.
            template: The enclosing template, defaults to ``text``.

        """
        self.text = text
        self.base = base
        self.template = text if template is None else template
        self.pos = 0

    @property
    def at_end(self) -> bool:
        """Whether every character has been consumed."""
        return self.pos >= len(self.text)

    @property
    def offset(self) -> int:
        """Current position relative to the enclosing template."""
        return self.base + self.pos

    def remaining(self) -> str:
        """Return the unconsumed text."""
        return self.text[self.pos :]

    def peek(self, ahead: int = 0) -> str | None:
        """Return the character ``ahead`` places past the position, if any."""
        index = self.pos + ahead
        if index < len(self.text):
            return self.text[index]
        return None

    def startswith(self, literal: str) -> bool:
        """Whether the unconsumed text begins with ``literal``."""
        return self.text.startswith(literal, self.pos)

    def eat(self, literal: str) -> bool:
        """Consume ``literal`` if it comes next."""
        if self.startswith(literal):
            self.pos += len(literal)
            return True
        return False

    def eat_one_of(self, chars: str) -> str | None:
        """Consume and return the next character if it is in ``chars``."""
        char = self.peek()
        if char is not None and char in chars:
            self.pos += 1
            return char
        return None

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters matching ``predicate``."""
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]

    def take_until(self, chars: str) -> str:
        """Consume up to, not including, the first character in ``chars``."""
        return self.take_while(lambda char: char not in chars)

    def find(self, char: str) -> int:
        """Return the index of the next ``char`` at or after the position, or -1."""
        return self.text.find(char, self.pos)
