"""Error types raised while reading sequents."""

from typing import Any, Dict


class SequentSyntaxError(ValueError):
    """Malformed input, located by a character offset into the original string."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at position {position})")
        self.message = message
        self.position = position

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "position": self.position}


class InternalError(RuntimeError):
    """An invariant of the tokenizer, parser or derivation tree was violated.

    This signals a bug in seqprover rather than a problem with user input.
    """
