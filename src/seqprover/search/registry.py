"""Registry for proof search strategies."""

from typing import Dict, Type, List, Any

from .base import Search
from .backward import BackwardSearch


class SearchRegistry:
    """Registry for managing proof search strategies."""

    def __init__(self):
        self._searches: Dict[str, Type[Search]] = {}
        self._register_default_searches()

    def _register_default_searches(self):
        """Register default search strategies."""
        self.register('backward', BackwardSearch)

    def register(self, name: str, search_class: Type[Search]):
        """Register a new search strategy."""
        self._searches[name.lower()] = search_class

    def create_search(self, name: str, **kwargs: Any) -> Search:
        """Create a search instance."""
        name = name.lower()
        if name not in self._searches:
            raise ValueError(f"Unknown search strategy: {name}")

        return self._searches[name](**kwargs)

    def list_searches(self) -> List[str]:
        """List available search strategy names."""
        return list(self._searches.keys())


_registry = SearchRegistry()


def get_search(name: str = "backward", **kwargs: Any) -> Search:
    """Get a proof search instance."""
    return _registry.create_search(name, **kwargs)


def list_searches() -> List[str]:
    """List available search strategy names."""
    return _registry.list_searches()
