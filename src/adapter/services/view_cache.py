"""View Cache Implementations"""

import logging
import threading
from typing import Any, Dict, Optional
from src.app.services.view_cache import ViewCache

logger = logging.getLogger(__name__)


class InMemoryViewCache(ViewCache):
    """
    Process-local view cache

    One instance is shared by all requests of the application. A path is
    stale when it has no entry.
    """

    def __init__(self):
        self._views: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._views.get(path)

    def generation(self, path: str) -> int:
        with self._lock:
            return self._generations.get(path, 0)

    def set(self, path: str, view: Any, generation: Optional[int] = None) -> bool:
        with self._lock:
            if generation is not None and generation != self._generations.get(path, 0):
                stored = False
            else:
                self._views[path] = view
                stored = True
        if not stored:
            logger.debug(f"Dropped view {path} fetched before generation {generation} was invalidated")
        return stored

    def invalidate(self, path: str) -> None:
        with self._lock:
            removed = self._views.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
        logger.debug(f"Invalidated view {path} (cached={removed is not None})")

    def is_stale(self, path: str) -> bool:
        with self._lock:
            return path not in self._views
