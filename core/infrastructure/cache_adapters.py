"""
Cache adapter implementations.

Provides the Django cache implementation of CachePort. The backend is
chosen in settings (Redis in deployments, local memory in tests).
"""

import logging
from typing import Any, Optional

from asgiref.sync import sync_to_async
from django.conf import settings
from django.core.cache import cache

from core.infrastructure.cache import CachePort

logger = logging.getLogger(__name__)


class DjangoCacheAdapter(CachePort):
    """
    Django cache adapter implementing CachePort.

    Cache failures are logged and treated as misses so a cache outage
    never fails a catalog query.
    """

    def __init__(self, default_timeout: Optional[int] = None):
        if default_timeout is None:
            default_timeout = getattr(settings, "CATALOG_CACHE_TIMEOUT", 300)
        self.default_timeout = default_timeout

    async def get(self, key: str) -> Optional[Any]:
        """
        Get a value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        try:
            value = await sync_to_async(cache.get)(key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error getting from cache: %s", e, exc_info=True)
            return None
        logger.debug("Cache %s: %s", "hit" if value is not None else "miss", key)
        return value

    async def set(self, key: str, value: Any, timeout: Optional[int] = None) -> None:
        """
        Set a value in cache.

        Args:
            key: Cache key
            value: Value to cache
            timeout: Timeout in seconds (adapter default when None)
        """
        timeout = self.default_timeout if timeout is None else timeout
        try:
            await sync_to_async(cache.set)(key, value, timeout=timeout)
            logger.debug("Cache set: %s (timeout=%s)", key, timeout)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error setting cache: %s", e, exc_info=True)

    async def delete(self, key: str) -> None:
        """
        Delete a value from cache.

        Args:
            key: Cache key
        """
        try:
            await sync_to_async(cache.delete)(key)
            logger.debug("Cache delete: %s", key)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Error deleting from cache: %s", e, exc_info=True)
