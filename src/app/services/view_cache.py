"""View Cache Interface

Holds rendered views keyed by logical path so they can be invalidated after
a mutation.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ViewCache(ABC):
    """
    Abstract cache of rendered views

    A path is stale when it has no cached entry. The next read of a stale
    path must fetch fresh data and store it again.

    Each path carries a generation that every invalidation advances. A
    reader records the generation before fetching and passes it to set(),
    so a view fetched before an invalidation is never stored after it.
    """

    @abstractmethod
    def get(self, path: str) -> Optional[Any]:
        """Return the cached view for path, or None when stale"""
        pass

    @abstractmethod
    def generation(self, path: str) -> int:
        """Current generation of path"""
        pass

    @abstractmethod
    def set(self, path: str, view: Any, generation: Optional[int] = None) -> bool:
        """
        Store a view for path

        Args:
            path: View path
            view: Rendered view
            generation: Generation read before the view was fetched. When
                given and the path has been invalidated since, nothing is
                stored.

        Returns:
            True if the view was stored
        """
        pass

    @abstractmethod
    def invalidate(self, path: str) -> None:
        """
        Mark a view path as stale

        Invalidating an already stale path is a no-op.
        """
        pass
