"""
Pytest configuration and shared fixtures.
"""

import pytest

from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.infrastructure.repositories.django_product_repository import DjangoProductRepository
from core.domain.events import DomainEvent
from core.infrastructure.cache import InMemoryCache
from core.infrastructure.events import InMemoryEventBus
from core.infrastructure.repositories.in_memory_repository import InMemoryRepository
from factories import BrandFactory, ProductFactory, RecordingHandler, sequence


@pytest.fixture
def event_bus():
    """Fixture for an isolated event bus."""
    return InMemoryEventBus()


@pytest.fixture
def recorded_events(event_bus):
    """Fixture recording every event published on the event bus."""
    handler = RecordingHandler()
    event_bus.subscribe(DomainEvent, handler)
    return handler


@pytest.fixture
def cache():
    """Fixture for an in-memory cache."""
    return InMemoryCache()


@pytest.fixture
def brand_factory():
    """Fixture for a Brand builder with its own sequence."""
    return BrandFactory(sequence())


@pytest.fixture
def product_factory():
    """Fixture for a Product builder with its own sequence."""
    return ProductFactory(sequence())


@pytest.fixture
def memory_brand_repository(event_bus):
    """Fixture for an in-memory brand repository."""
    return InMemoryRepository(event_bus)


@pytest.fixture
def memory_product_repository(event_bus):
    """Fixture for an in-memory product repository."""
    return InMemoryRepository(event_bus)


@pytest.fixture
def brand_repository(event_bus):
    """Fixture for the Django brand repository."""
    return DjangoBrandRepository(event_bus)


@pytest.fixture
def product_repository(event_bus):
    """Fixture for the Django product repository."""
    return DjangoProductRepository(event_bus)
