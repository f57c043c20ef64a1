"""
App configuration for Catalog Service.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CatalogServiceConfig(AppConfig):
    """App configuration for CatalogService."""

    name = "CatalogService"
    verbose_name = "Catalog Service"

    def ready(self):
        """Register domain event handlers once the app registry is loaded."""
        if getattr(self, "_initialized", False):
            return

        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()
        self._initialized = True
        logger.info("Catalog event handlers ready")
