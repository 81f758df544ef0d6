"""Library Application Service - loads, seeds and saves catalog and listeners."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.catalog.index import CatalogIndex
from ...domain.shared.exceptions import DocumentNotFoundError, PersistenceError
from ...domain.shared.messages import LogTemplates
from .starter_catalog import seed_starter_catalog

if TYPE_CHECKING:
    from ...domain.catalog.repository import CatalogRepository
    from ...domain.listeners.registry import ListenerRegistry
    from ...domain.listeners.repository import ListenerRepository

logger = logging.getLogger(__name__)


class LibraryApplicationService:
    """Moves the catalog and listener registry to and from persistence.

    Persistence faults never escape: they are logged and reported through
    the bool result of :meth:`load` and :meth:`save`.
    """

    def __init__(
        self,
        *,
        catalog: CatalogIndex,
        listeners: ListenerRegistry,
        catalog_repository: CatalogRepository,
        listener_repository: ListenerRepository,
        seed_when_missing: bool = True,
    ) -> None:
        self._catalog = catalog
        self._listeners = listeners
        self._catalog_repo = catalog_repository
        self._listener_repo = listener_repository
        self._seed_when_missing = seed_when_missing

    def load(self) -> bool:
        """Replace in-memory state with the persisted library.

        Returns:
            True if the catalog and listeners were loaded. False if either
            failed; a failed catalog load falls back to the starter catalog
            when seeding is enabled.
        """
        try:
            items = self._catalog_repo.load()
        except PersistenceError as exc:
            logger.warning(LogTemplates.LIBRARY_LOAD_FAILED, exc.message)
            if self._seed_when_missing:
                self.seed()
            return False

        # Resolve listeners against the loaded items before touching live state.
        staged = CatalogIndex(items)
        try:
            listeners = self._listener_repo.load(staged)
        except DocumentNotFoundError:
            listeners = []
        except PersistenceError as exc:
            logger.warning(LogTemplates.LIBRARY_LOAD_FAILED, exc.message)
            self._catalog.replace_all(items)
            self._listeners.replace_all([])
            return False

        self._catalog.replace_all(items)
        self._listeners.replace_all(listeners)
        logger.info(LogTemplates.LIBRARY_LOADED, len(self._catalog), len(self._listeners))
        return True

    def seed(self) -> int:
        """Fill an empty catalog with the starter data and return the count added."""
        added = seed_starter_catalog(self._catalog)
        if added:
            logger.info(LogTemplates.LIBRARY_SEEDED, added)
        return added

    def save(self) -> bool:
        try:
            self._catalog_repo.save(self._catalog.all_items())
            self._listener_repo.save(self._listeners.all())
        except PersistenceError as exc:
            logger.warning(LogTemplates.LIBRARY_SAVE_FAILED, exc.message)
            return False

        logger.info(LogTemplates.LIBRARY_SAVED, len(self._catalog), len(self._listeners))
        return True
