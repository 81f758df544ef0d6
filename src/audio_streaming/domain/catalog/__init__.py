"""
Catalog Bounded Context

Domain logic for catalog items, author deduplication, search and popularity ranking.
"""

from audio_streaming.domain.catalog.entities import (
    AudioItem,
    Author,
    CatalogItem,
    Episode,
    Release,
    Track,
)
from audio_streaming.domain.catalog.index import CatalogIndex
from audio_streaming.domain.catalog.repository import CatalogRepository
from audio_streaming.domain.catalog.services import PopularityRanking
from audio_streaming.domain.catalog.value_objects import ItemKind, Popularity, normalize_term

__all__ = [
    # Entities
    "AudioItem",
    "Track",
    "Episode",
    "CatalogItem",
    "Author",
    "Release",
    # Aggregate
    "CatalogIndex",
    # Value Objects
    "ItemKind",
    "Popularity",
    "normalize_term",
    # Repository
    "CatalogRepository",
    # Services
    "PopularityRanking",
]
