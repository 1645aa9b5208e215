"""Reading and writing sequents as text."""

from .tokenizer import Tokenizer
from .parser import parse_term, parse_sequent, parse_sequent_string, parse_term_string
from .base import FileFormat
from .sequent import SequentFormat, AsciiSequentFormat
from .registry import FileFormatRegistry, get_format_handler, list_formats

__all__ = [
    'Tokenizer',
    'parse_term', 'parse_sequent', 'parse_sequent_string', 'parse_term_string',
    'FileFormat', 'SequentFormat', 'AsciiSequentFormat',
    'FileFormatRegistry', 'get_format_handler', 'list_formats'
]
