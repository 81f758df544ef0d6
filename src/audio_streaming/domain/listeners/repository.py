"""
Listener Domain Repository Interface

Abstract base class defining the wholesale persistence contract for listeners.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from audio_streaming.domain.catalog.index import CatalogIndex
from audio_streaming.domain.listeners.entities import Listener


class ListenerRepository(ABC):
    """Abstract repository storing every listener as one document."""

    @abstractmethod
    def load(self, catalog: CatalogIndex) -> list[Listener]:
        """Load every listener, resolving likes and playlists against ``catalog``.

        Item references missing from the catalog are dropped.

        Raises:
            DocumentNotFoundError: If nothing has been saved yet.
            PersistenceError: If the stored document is unreadable.
        """
        ...

    @abstractmethod
    def save(self, listeners: Sequence[Listener]) -> None:
        """Replace the stored listeners.

        Raises:
            PersistenceError: If the document cannot be written.
        """
        ...
