"""Catalog index: ordered item collection, search index and author cache."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Iterator
from typing import ClassVar

from audio_streaming.domain.catalog.entities import AudioItem, Author, Release, Track
from audio_streaming.domain.catalog.services import PopularityRanking
from audio_streaming.domain.catalog.value_objects import normalize_term
from audio_streaming.domain.shared.messages import LogTemplates
from audio_streaming.domain.shared.value_objects import ItemId

logger = logging.getLogger(__name__)


def _index_keys(item: AudioItem) -> list[str]:
    keys = [normalize_term(item.title)]
    if isinstance(item, Track):
        keys.append(normalize_term(item.author_name))
    return keys


def _matches_substring(item: AudioItem, term: str) -> bool:
    if term in normalize_term(item.title):
        return True
    return isinstance(item, Track) and term in normalize_term(item.author_name)


class CatalogIndex:
    """Aggregate holding every playable item known to the session.

    Insertion order is catalog order and duplicate titles are allowed. Each
    item is indexed under its normalized title and, for tracks, under its
    author's normalized name. Authors are deduplicated by case-folded name
    through :meth:`get_or_create_author`.

    Not thread-safe: a multi-session deployment must serialize writers.
    """

    RECOMMENDATION_LIMIT: ClassVar[int] = PopularityRanking.DEFAULT_RECOMMENDATION_LIMIT

    def __init__(self, items: Iterable[AudioItem] = ()) -> None:
        self._items: list[AudioItem] = []
        self._by_id: dict[ItemId, AudioItem] = {}
        self._search_index: dict[str, list[AudioItem]] = defaultdict(list)
        self._authors: dict[str, Author] = {}
        self.add_items(items)

    # === Authors ===

    def get_or_create_author(self, name: str, genres: Iterable[str] = ()) -> Author:
        """Return the cached author for ``name``, creating it on first use.

        Names differing only by case or surrounding whitespace resolve to the
        same instance. Any ``genres`` given are merged into the author's
        genre set.
        """
        key = normalize_term(name)
        author = self._authors.get(key)
        if author is None:
            author = Author(name=name.strip())
            self._authors[key] = author
            logger.debug(LogTemplates.CATALOG_AUTHOR_CREATED, name)

        for genre in genres:
            author.add_genre(genre)
        return author

    def authors(self) -> list[Author]:
        return list(self._authors.values())

    def releases(self) -> list[Release]:
        """Distinct releases referenced by catalog tracks, in first-seen order."""
        seen: dict[Release, None] = {}
        for item in self._items:
            if isinstance(item, Track) and item.release is not None:
                seen.setdefault(item.release, None)
        return list(seen)

    # === Ingestion ===

    def add_item(self, item: AudioItem) -> None:
        """Append an item and index it under its title and author keys."""
        self._items.append(item)
        self._by_id.setdefault(item.id, item)
        keys = _index_keys(item)
        for key in keys:
            self._search_index[key].append(item)
        logger.debug(LogTemplates.CATALOG_ITEM_ADDED, item.title, len(keys))

    def add_items(self, items: Iterable[AudioItem]) -> int:
        count = 0
        for item in items:
            self.add_item(item)
            count += 1
        return count

    def replace_all(self, items: Iterable[AudioItem]) -> None:
        """Hydrate the catalog wholesale, e.g. after loading from disk.

        The search index and author cache are rebuilt from the new items.
        The current state is only swapped out once the rebuild succeeded.
        """
        fresh = CatalogIndex()
        for item in items:
            if isinstance(item, Track):
                fresh._authors.setdefault(normalize_term(item.author_name), item.author)
            fresh.add_item(item)

        self._items = fresh._items
        self._by_id = fresh._by_id
        self._search_index = fresh._search_index
        self._authors = fresh._authors
        logger.info(LogTemplates.CATALOG_REPLACED, len(self._items), len(self._authors))

    # === Queries ===

    def search(self, term: str) -> list[AudioItem]:
        """Find items by exact key, falling back to a substring scan.

        When the normalized term is an index key, the indexed list itself is
        returned. That list is a live view into the catalog: callers must not
        mutate it. Otherwise a new list is built from every item whose title,
        or track author name, contains the term. The substring scan never
        runs when an exact key matched.
        """
        normalized = normalize_term(term)
        exact = self._search_index.get(normalized)
        if exact is not None:
            logger.debug(LogTemplates.CATALOG_SEARCH_EXACT, term, len(exact))
            return exact

        results = [item for item in self._items if _matches_substring(item, normalized)]
        logger.debug(LogTemplates.CATALOG_SEARCH_SCAN, term, len(results))
        return results

    def get_item(self, item_id: ItemId) -> AudioItem | None:
        return self._by_id.get(item_id)

    def all_items(self) -> tuple[AudioItem, ...]:
        """Read-only snapshot of the catalog in insertion order."""
        return tuple(self._items)

    def rank_by_popularity(self) -> list[AudioItem]:
        """Copy of the catalog ordered by likes desc, then plays desc."""
        return PopularityRanking.rank(self._items)

    def recommend(self, limit: int = RECOMMENDATION_LIMIT) -> list[AudioItem]:
        """The most popular items, at most ``limit`` of them."""
        return PopularityRanking.top(self._items, limit)

    def contains(self, item: AudioItem) -> bool:
        return item in self._items

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __contains__(self, item: object) -> bool:
        return isinstance(item, AudioItem) and self.contains(item)

    def __iter__(self) -> Iterator[AudioItem]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)
