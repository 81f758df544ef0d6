"""Value objects for the catalog bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ItemKind(Enum):
    """Closed set of catalog item variants."""

    TRACK = "track"
    EPISODE = "episode"


def normalize_term(value: str) -> str:
    """Trim and case-fold a title, author name or search term into an index key."""
    return value.strip().casefold()


@dataclass(frozen=True, slots=True)
class Popularity:
    """Sortable popularity score: likes first, plays as the tie-break."""

    likes: int
    plays: int

    @property
    def sort_key(self) -> tuple[int, int]:
        # Ascending sort on negated counters gives the descending ranking.
        return (-self.likes, -self.plays)

    def __str__(self) -> str:
        return f"Plays: {self.plays} | Likes: {self.likes}"
