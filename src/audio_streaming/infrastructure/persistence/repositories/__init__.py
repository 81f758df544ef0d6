"""JSON repository implementations."""

from audio_streaming.infrastructure.persistence.repositories.catalog_repository import (
    JsonCatalogRepository,
)
from audio_streaming.infrastructure.persistence.repositories.listener_repository import (
    JsonListenerRepository,
)

__all__ = [
    "JsonCatalogRepository",
    "JsonListenerRepository",
]
