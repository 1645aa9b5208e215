"""Core propositional data structures."""

from .logic import (
    Term, Variable, Not, And, Or, Sequent,
    TURNSTILE, EMPTY, NOT, AND, OR,
    ASCII_ALIASES, UNICODE_GLYPHS, ASCII_GLYPHS
)
from .exceptions import SequentSyntaxError, InternalError
from .serialization import (
    CoreJSONEncoder, decode_core_object,
    sequent_to_json, sequent_from_json,
    save_sequent, load_sequent
)

__all__ = [
    # Logic
    'Term', 'Variable', 'Not', 'And', 'Or', 'Sequent',
    'TURNSTILE', 'EMPTY', 'NOT', 'AND', 'OR',
    'ASCII_ALIASES', 'UNICODE_GLYPHS', 'ASCII_GLYPHS',
    # Errors
    'SequentSyntaxError', 'InternalError',
    # Serialization
    'CoreJSONEncoder', 'decode_core_object',
    'sequent_to_json', 'sequent_from_json',
    'save_sequent', 'load_sequent'
]
