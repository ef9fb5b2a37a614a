"""Cache module for the todo bridge."""

from todobridge.cache.base import BaseCacheManager
from todobridge.cache.todo import TodoCache

__all__ = [
    "BaseCacheManager",
    "TodoCache",
]
