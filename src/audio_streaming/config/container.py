"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the catalog, queue, repositories, services and
handlers. Components are created on-demand and cached for reuse throughout
the application.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.commands.toggle_like import ToggleLikeHandler
    from ..application.queries.get_queue import GetQueueHandler
    from ..application.services.library_service import LibraryApplicationService
    from ..application.services.player_service import PlayerApplicationService
    from ..domain.catalog.index import CatalogIndex
    from ..domain.catalog.repository import CatalogRepository
    from ..domain.listeners.registry import ListenerRegistry
    from ..domain.listeners.repository import ListenerRepository
    from ..domain.playback.queue import PlaybackQueue
    from ..infrastructure.persistence.json_store import JsonDocumentStore
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    This container manages all application dependencies and their lifecycle.
    Components are lazily initialized when first accessed.
    """

    settings: Settings

    # Aggregates
    _catalog: CatalogIndex | None = None
    _queue: PlaybackQueue | None = None
    _listeners: ListenerRegistry | None = None

    # Persistence layer
    _document_store: JsonDocumentStore | None = None
    _catalog_repository: CatalogRepository | None = None
    _listener_repository: ListenerRepository | None = None

    # Application services
    _library_service: LibraryApplicationService | None = None
    _player_service: PlayerApplicationService | None = None

    # Handlers
    _toggle_like_handler: ToggleLikeHandler | None = None
    _get_queue_handler: GetQueueHandler | None = None

    _initialized: bool = False

    # === Aggregates ===

    @property
    def catalog(self) -> CatalogIndex:
        if self._catalog is None:
            from ..domain.catalog.index import CatalogIndex

            self._catalog = CatalogIndex()
        return self._catalog

    @property
    def queue(self) -> PlaybackQueue:
        """Get the playback queue, seeded for reproducible shuffles when configured."""
        if self._queue is None:
            import random

            from ..domain.playback.queue import PlaybackQueue

            seed = self.settings.player.shuffle_seed
            rng = random.Random(seed) if seed is not None else None
            self._queue = PlaybackQueue(rng=rng)
        return self._queue

    @property
    def listeners(self) -> ListenerRegistry:
        if self._listeners is None:
            from ..domain.listeners.registry import ListenerRegistry

            self._listeners = ListenerRegistry()
        return self._listeners

    # === Persistence ===

    @property
    def document_store(self) -> JsonDocumentStore:
        if self._document_store is None:
            from ..infrastructure.persistence.json_store import JsonDocumentStore

            self._document_store = JsonDocumentStore(self.settings.storage.data_dir)
        return self._document_store

    @property
    def catalog_repository(self) -> CatalogRepository:
        if self._catalog_repository is None:
            from ..infrastructure.persistence.repositories.catalog_repository import (
                JsonCatalogRepository,
            )

            self._catalog_repository = JsonCatalogRepository(
                self.document_store, self.settings.storage.catalog_file
            )
        return self._catalog_repository

    @property
    def listener_repository(self) -> ListenerRepository:
        if self._listener_repository is None:
            from ..infrastructure.persistence.repositories.listener_repository import (
                JsonListenerRepository,
            )

            self._listener_repository = JsonListenerRepository(
                self.document_store, self.settings.storage.listeners_file
            )
        return self._listener_repository

    # === Application Services ===

    @property
    def library_service(self) -> LibraryApplicationService:
        """Get the library application service."""
        if self._library_service is None:
            from ..application.services.library_service import LibraryApplicationService

            self._library_service = LibraryApplicationService(
                catalog=self.catalog,
                listeners=self.listeners,
                catalog_repository=self.catalog_repository,
                listener_repository=self.listener_repository,
                seed_when_missing=self.settings.storage.seed_when_missing,
            )
        return self._library_service

    @property
    def player_service(self) -> PlayerApplicationService:
        """Get the player application service."""
        if self._player_service is None:
            from ..application.services.player_service import PlayerApplicationService

            self._player_service = PlayerApplicationService(
                queue=self.queue,
                catalog=self.catalog,
                listeners=self.listeners,
                recommendation_limit=self.settings.catalog.recommendation_limit,
            )
        return self._player_service

    # === Handlers ===

    @property
    def toggle_like_handler(self) -> ToggleLikeHandler:
        if self._toggle_like_handler is None:
            from ..application.commands.toggle_like import ToggleLikeHandler

            self._toggle_like_handler = ToggleLikeHandler(
                listeners=self.listeners,
                catalog=self.catalog,
                queue=self.queue,
            )
        return self._toggle_like_handler

    @property
    def get_queue_handler(self) -> GetQueueHandler:
        if self._get_queue_handler is None:
            from ..application.queries.get_queue import GetQueueHandler

            self._get_queue_handler = GetQueueHandler(queue=self.queue)
        return self._get_queue_handler

    # === Lifecycle ===

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        """Load the library from disk, seeding it when nothing usable is stored.

        Returns:
            True if the persisted library was loaded as-is.
        """
        loaded = self.library_service.load()
        self._initialized = True
        return loaded

    def shutdown(self) -> bool:
        """Flush the library to disk. A no-op before :meth:`initialize`."""
        if not self._initialized:
            return False

        saved = self.library_service.save()
        if self._queue is not None:
            self._queue.clear()
        self._initialized = False
        return saved


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
