"""Base cache class for all cache implementations."""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseCacheManager(ABC, Generic[T]):
    """Abstract base class for in-process cache managers.

    Every access to the underlying store happens under ``self.lock``, so a
    single instance can be shared by any number of threads.
    """

    def __init__(self, name: str) -> None:
        """Initialize cache manager.

        Args:
            name: Cache name used in log messages
        """
        self.name = name
        self.lock = threading.RLock()
        self._store: dict[str, T] = {}

        logger.debug(f"Initialized {name} cache")

    def clear_cache(self) -> None:
        """Clear all cached data."""
        with self.lock:
            self._store.clear()
        logger.info(f"Cleared {self.name} cache")

    def has_cache(self) -> bool:
        """Check if any cache exists.

        Returns:
            True if cache has any entries
        """
        with self.lock:
            return len(self._store) > 0

    def get_cache_size(self) -> int:
        """Get number of items in cache."""
        with self.lock:
            return len(self._store)

    def delete_item(self, key: str) -> bool:
        """Delete a specific cache item.

        Args:
            key: Cache key to delete

        Returns:
            True if item was deleted, False if not found
        """
        with self.lock:
            return self._store.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        """Check if a cache key exists."""
        with self.lock:
            return key in self._store

    def __len__(self) -> int:
        return self.get_cache_size()

    def __contains__(self, key: object) -> bool:
        with self.lock:
            return key in self._store

    @abstractmethod
    def save(self, key: str, data: T) -> None:
        """Save data to cache.

        Args:
            key: Cache key
            data: Data to cache
        """
        pass

    @abstractmethod
    def load(self, key: str) -> T | None:
        """Load data from cache.

        Args:
            key: Cache key

        Returns:
            Cached data or None if not found
        """
        pass
