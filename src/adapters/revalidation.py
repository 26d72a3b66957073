"""
Route revalidation adapters.

Implementations of the invoices RevalidationPort. A revalidation marks the
cached rendering of a path stale so the next request recomputes it.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class RevalidationAdapter(ABC):
    """
    Abstract base class for revalidation adapters.

    Concrete implementations handle platform-specific revalidation.
    """

    @abstractmethod
    def revalidate_path(self, path: str) -> bool:
        """Revalidate by path."""
        pass

    def revalidate_paths(self, paths: list[str]) -> dict[str, bool]:
        """Revalidate multiple paths."""
        return {path: self.revalidate_path(path) for path in paths}


class PathRevalidationAdapter(RevalidationAdapter):
    """
    Process-wide stale-path registry.

    Each revalidation bumps the path's generation; renderers compare the
    generation they cached against ``generation(path)`` to detect staleness.
    """

    def __init__(self) -> None:
        self._generations: dict[str, int] = {}
        self._lock = threading.Lock()

    def revalidate_path(self, path: str) -> bool:
        with self._lock:
            self._generations[path] = self._generations.get(path, 0) + 1
            generation = self._generations[path]
        logger.info("Revalidated %s (generation %d)", path, generation)
        return True

    def generation(self, path: str) -> int:
        with self._lock:
            return self._generations.get(path, 0)

    def is_stale(self, path: str, cached_generation: int) -> bool:
        return self.generation(path) != cached_generation


class StubRevalidationAdapter(RevalidationAdapter):
    """
    Stub adapter for testing.

    Records all revalidation calls without performing actual revalidation.
    """

    def __init__(self) -> None:
        self.revalidated_paths: list[str] = []

    def revalidate_path(self, path: str) -> bool:
        """Record path revalidation."""
        self.revalidated_paths.append(path)
        return True

    def reset(self) -> None:
        """Reset recorded calls."""
        self.revalidated_paths = []
