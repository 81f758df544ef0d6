"""
Catalog Domain Services

Domain services containing ranking rules shared by the catalog index
and the playback queue.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from audio_streaming.domain.catalog.entities import AudioItem


class PopularityRanking:
    """Domain service for popularity ordering.

    Items are ranked by like count (descending), ties broken by play count
    (descending). The sort is stable, so items that tie on both counters keep
    their original relative order.
    """

    DEFAULT_RECOMMENDATION_LIMIT = 5

    @staticmethod
    def sort_key(item: AudioItem) -> tuple[int, int]:
        """Key for ``sorted``/``list.sort`` producing the popularity order.

        Args:
            item: The catalog item to score.

        Returns:
            A tuple that sorts ascending into likes desc, plays desc.
        """
        return item.popularity.sort_key

    @classmethod
    def rank(cls, items: Iterable[AudioItem]) -> list[AudioItem]:
        """Return a new list with the items in popularity order.

        Args:
            items: Items to rank. The input is left untouched.

        Returns:
            A ranked copy.
        """
        return sorted(items, key=cls.sort_key)

    @classmethod
    def top(cls, items: Iterable[AudioItem], limit: int = DEFAULT_RECOMMENDATION_LIMIT) -> list[AudioItem]:
        """Return at most ``limit`` of the most popular items."""
        return cls.rank(items)[: max(limit, 0)]

    @classmethod
    def is_ranked(cls, items: Sequence[AudioItem]) -> bool:
        """Check that a sequence already respects the popularity order."""
        return all(
            cls.sort_key(items[i]) <= cls.sort_key(items[i + 1]) for i in range(len(items) - 1)
        )
