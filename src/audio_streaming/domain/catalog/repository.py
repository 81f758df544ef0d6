"""
Catalog Domain Repository Interface

Abstract base class defining the wholesale persistence contract for the catalog.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from audio_streaming.domain.catalog.entities import AudioItem


class CatalogRepository(ABC):
    """Abstract repository storing the whole catalog as one document.

    There is no partial persistence: ``load`` returns everything and ``save``
    replaces everything.
    """

    @abstractmethod
    def load(self) -> list[AudioItem]:
        """Load every catalog item, with authors and releases re-linked.

        Returns:
            The items in catalog order.

        Raises:
            DocumentNotFoundError: If nothing has been saved yet.
            PersistenceError: If the stored document is unreadable.
        """
        ...

    @abstractmethod
    def save(self, items: Sequence[AudioItem]) -> None:
        """Replace the stored catalog with ``items``.

        Args:
            items: The catalog in order.

        Raises:
            PersistenceError: If the document cannot be written.
        """
        ...
