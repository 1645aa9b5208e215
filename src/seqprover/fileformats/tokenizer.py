"""Tokenizer for sequent strings."""

import re
from typing import Optional

from seqprover.core.logic import ASCII_ALIASES, TURNSTILE, EMPTY, NOT, AND, OR
from seqprover.core.exceptions import SequentSyntaxError, InternalError


IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9]*")
_TOKEN = re.compile(
    r"[A-Za-z][A-Za-z0-9]*|[,()" +
    re.escape("".join(ASCII_ALIASES)) +
    re.escape(EMPTY + NOT + AND + OR + TURNSTILE) +
    r"]"
)
_BLANKS = re.compile(r"[ \t]*")


class Tokenizer:
    """Splits a sequent string into a stream of normalized tokens.

    ``pos`` is always the character offset of the next token in the original
    string, so it can be used directly as an error position.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self._skip_blanks()

    def peek(self) -> Optional[str]:
        """Return the next token without consuming it, or None at end of input."""
        if self.pos == len(self.text):
            return None

        match = _TOKEN.match(self.text, self.pos)
        if match is None:
            raise SequentSyntaxError("Invalid symbol", self.pos)

        token = match.group()
        return ASCII_ALIASES.get(token, token)

    def take(self) -> str:
        """Return the next token and advance past it."""
        token = self.peek()
        if token is None:
            raise InternalError("Advancing beyond last token")
        # Aliases and glyphs are both one character, so the normalized token
        # has the same length as the source text it came from.
        self.pos += len(token)
        self._skip_blanks()
        return token

    def consume(self, expected: str) -> None:
        """Take the next token, which must equal ``expected``."""
        token = self.take()
        if token != expected:
            raise InternalError(f"Token mismatch: expected {expected!r}, got {token!r}")

    def at_end(self) -> bool:
        return self.pos == len(self.text)

    def _skip_blanks(self):
        self.pos = _BLANKS.match(self.text, self.pos).end()

    def __iter__(self):
        while self.peek() is not None:
            yield self.take()
