"""
Cache abstraction (port).

Query handlers read through the cache; event handlers evict entries when
the cached aggregate changes.
"""
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional


class CachePort(ABC):
    """
    Abstract cache port.

    Implementations can use Redis, Memcached, or in-memory cache.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Get a value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Set a value in cache.

        Args:
            key: Cache key
            value: Value to cache
            timeout: Timeout in seconds (None for the backend default)
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Delete a value from cache.

        Args:
            key: Cache key
        """
        pass

    async def get_or_set(
        self,
        key: str,
        factory: Callable[[], Awaitable[Any]],
        timeout: Optional[int] = None,
    ) -> Any:
        """
        Return the cached value, computing and storing it on a miss.

        ``None`` results are returned but never cached.

        Args:
            key: Cache key
            factory: Coroutine function producing the value
            timeout: Timeout in seconds

        Returns:
            Cached or freshly computed value
        """
        value = await self.get(key)
        if value is not None:
            return value
        value = await factory()
        if value is not None:
            await self.set(key, value, timeout)
        return value


class InMemoryCache(CachePort):
    """Dictionary-backed cache; timeouts are ignored."""

    def __init__(self):
        self._store = {}

    async def get(self, key: str) -> Optional[Any]:
        return self._store.get(key)

    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        self._store[key] = value

    async def delete(self, key: str) -> None:
        self._store.pop(key, None)
