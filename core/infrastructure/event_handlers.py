"""
Event handlers for domain events.

These handlers process catalog domain events for side effects like
audit logging and cache invalidation.
"""

import logging
from typing import Optional

from brands.application.cache_keys import brand_cache_key, product_cache_key
from brands.domain.events import (
    BrandCreated,
    BrandDeleted,
    BrandEvent,
    BrandUpdated,
    ProductCreated,
    ProductDeleted,
    ProductEvent,
    ProductUpdated,
)
from core.domain.events import DomainEvent, EventBus, EventHandler
from core.infrastructure.cache import CachePort

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes one structured log record per domain event.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "raised_on": event.raised_on.isoformat(),
            },
        )


class CatalogCacheInvalidationHandler(EventHandler):
    """
    Event handler for cache invalidation.

    Evicts the cached read model of a brand or product when it is updated
    or deleted.
    """

    def __init__(self, cache: Optional[CachePort] = None):
        self._cache = cache

    @property
    def cache(self) -> CachePort:
        if self._cache is None:
            from core.infrastructure.cache_adapters import DjangoCacheAdapter

            self._cache = DjangoCacheAdapter()
        return self._cache

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for cache invalidation.

        Args:
            event: Domain event
        """
        if isinstance(event, BrandEvent):
            key = brand_cache_key(event.brand.id)
        elif isinstance(event, ProductEvent):
            key = product_cache_key(event.product.id)
        else:
            logger.debug("No cache entry for %s", event.event_type)
            return

        await self.cache.delete(key)
        logger.info("Cache invalidated for %s (event: %s)", key, event.event_type)


def register_event_handlers(bus: Optional[EventBus] = None, cache: Optional[CachePort] = None):
    """Register all event handlers with the event bus."""
    if bus is None:
        from core.infrastructure.events import event_bus as bus

    audit_handler = AuditLogEventHandler()
    cache_handler = CatalogCacheInvalidationHandler(cache)

    for event_type in (
        BrandCreated,
        BrandUpdated,
        BrandDeleted,
        ProductCreated,
        ProductUpdated,
        ProductDeleted,
    ):
        bus.subscribe(event_type, audit_handler)

    for event_type in (BrandUpdated, BrandDeleted, ProductUpdated, ProductDeleted):
        bus.subscribe(event_type, cache_handler)

    logger.info("Event handlers registered")
