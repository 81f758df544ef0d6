"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (JSON document store and repositories)
"""

from audio_streaming.infrastructure.persistence.json_store import JsonDocumentStore
from audio_streaming.infrastructure.persistence.repositories import (
    JsonCatalogRepository,
    JsonListenerRepository,
)

__all__ = [
    "JsonDocumentStore",
    "JsonCatalogRepository",
    "JsonListenerRepository",
]
