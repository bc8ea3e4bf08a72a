"""Handler access to the catalog service.

The server installs its :class:`CatalogService` here before it starts
serving, and tool and resource handlers look it up on every call.
"""

import logging
from typing import TYPE_CHECKING, Optional

from .constants import ErrorMessage

if TYPE_CHECKING:
    from .catalog.service import CatalogService

logger = logging.getLogger(__name__)

_catalog_service: Optional["CatalogService"] = None


class HandlerContext:
    """Holds the service instance shared by all handlers."""

    @staticmethod
    def set(service: Optional["CatalogService"]) -> None:
        """Install (or, with ``None``, remove) the catalog service."""
        global _catalog_service
        _catalog_service = service
        logger.debug(f"Catalog service context {'set' if service else 'cleared'}")

    @staticmethod
    def get() -> Optional["CatalogService"]:
        return _catalog_service

    @staticmethod
    def require() -> "CatalogService":
        """Return the installed service.

        Raises:
            RuntimeError: If no service has been installed
        """
        if _catalog_service is None:
            raise RuntimeError(f"{ErrorMessage.SERVICE_CONTEXT_NOT_SET}. Was the server started?")
        return _catalog_service


def get_catalog_service() -> "CatalogService":
    """Convenience wrapper around :meth:`HandlerContext.require`."""
    return HandlerContext.require()
