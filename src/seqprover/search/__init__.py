"""Proof search strategies."""

from .base import Search
from .backward import BackwardSearch, default_rules
from .registry import SearchRegistry, get_search, list_searches

__all__ = [
    'Search', 'BackwardSearch', 'default_rules',
    'SearchRegistry', 'get_search', 'list_searches'
]
