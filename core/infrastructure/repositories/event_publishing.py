"""
Publishing of queued domain events after a successful write.
"""

import logging

from core.domain.entity import BaseEntity
from core.domain.events import EventBus

logger = logging.getLogger(__name__)


async def publish_domain_events(entity: BaseEntity, bus: EventBus) -> None:
    """
    Publish every queued event of an entity, oldest first, then clear them.

    Args:
        entity: Entity whose changes were just stored
        bus: Event bus to publish on
    """
    for event in entity.domain_events:
        logger.debug("Publishing %s for %s", event.event_type, event.aggregate_id)
        await bus.publish(event)
    entity.clear_domain_events()
