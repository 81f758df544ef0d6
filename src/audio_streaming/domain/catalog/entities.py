"""Core domain entities for the catalog bounded context."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from audio_streaming.domain.catalog.value_objects import ItemKind, Popularity
from audio_streaming.domain.shared.messages import DisplayLabels, LogTemplates
from audio_streaming.domain.shared.types import (
    DurationSeconds,
    EpisodeNumber,
    NonEmptyStr,
    NonNegativeInt,
    ReleaseYear,
    TitleStr,
)
from audio_streaming.domain.shared.value_objects import (
    AuthorId,
    AuthorIdField,
    ItemId,
    ItemIdField,
    ReleaseId,
    ReleaseIdField,
)

logger = logging.getLogger(__name__)


class Author(BaseModel):
    """A performer or band. Identity is the generated id, never the name."""

    model_config = ConfigDict(validate_assignment=True)

    id: AuthorIdField = Field(default_factory=AuthorId.new)
    name: NonEmptyStr
    genres: set[str] = Field(default_factory=set)

    def add_genre(self, genre: str) -> None:
        self.genres.add(genre)

    def genre_list(self) -> list[str]:
        return sorted(self.genres)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Author):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.name


class Release(BaseModel):
    """An album: an ordered run of tracks by one author."""

    model_config = ConfigDict(validate_assignment=True)

    id: ReleaseIdField = Field(default_factory=ReleaseId.new)
    title: TitleStr
    author: Author
    year: ReleaseYear
    tracks: list[Track] = Field(default_factory=list, repr=False, exclude=True)

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    def add_track(self, track: Track) -> None:
        """Append a track at the end of the release."""
        self.tracks.append(track)

    def track_list(self) -> list[Track]:
        return list(self.tracks)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Release):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.title} ({self.year}) - {self.author.name}"


class AudioItem(BaseModel):
    """Fields and behavior shared by every playable catalog item.

    The variant set is closed: an item is either a :class:`Track` or an
    :class:`Episode`. Two items are equal when they are the same variant and
    carry the same title, so a listener cannot like or playlist two items
    with an identical title.
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: ClassVar[ItemKind]

    id: ItemIdField = Field(default_factory=ItemId.new)
    title: TitleStr
    duration_seconds: DurationSeconds
    play_count: NonNegativeInt = 0
    like_count: NonNegativeInt = 0

    @property
    def popularity(self) -> Popularity:
        return Popularity(likes=self.like_count, plays=self.play_count)

    @property
    def duration_formatted(self) -> str:
        """Format duration as MM:SS or HH:MM:SS."""
        hours, remainder = divmod(self.duration_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    def increment_play(self) -> None:
        self.play_count += 1

    def like(self) -> None:
        self.like_count += 1

    def unlike(self) -> None:
        """Remove one like; the counter never drops below zero."""
        if self.like_count > 0:
            self.like_count -= 1

    def play(self) -> None:
        """Start playback of this item. Rendering is left to the session layer."""
        logger.debug(LogTemplates.ITEM_PLAYING, self.formatted_details())

    def pause(self) -> None:
        logger.debug(LogTemplates.ITEM_PAUSED, self.formatted_details())

    def formatted_details(self) -> str:
        """Short one-line description tagged with the item variant."""
        match self:
            case Track(author=author):
                return f"{DisplayLabels.TRACK_TAG} {self.title} ({author.name})"
            case Episode(host=host):
                return f"{DisplayLabels.EPISODE_TAG} {self.title} with {host}"
        raise TypeError(f"Unsupported catalog item type: {type(self).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AudioItem):
            return NotImplemented
        return type(self) is type(other) and self.title == other.title

    def __hash__(self) -> int:
        return hash(self.title)

    def __str__(self) -> str:
        return f"{self.formatted_details()} | {self.popularity}"


class Track(AudioItem):
    """A music track. ``release`` is None for singles."""

    kind: ClassVar[ItemKind] = ItemKind.TRACK

    author: Author
    release: Release | None = Field(default=None, repr=False)

    @property
    def author_name(self) -> str:
        return self.author.name

    @property
    def release_title(self) -> str:
        return self.release.title if self.release is not None else DisplayLabels.SINGLE

    @property
    def is_single(self) -> bool:
        return self.release is None


class Episode(AudioItem):
    """A podcast episode."""

    kind: ClassVar[ItemKind] = ItemKind.EPISODE

    host: NonEmptyStr
    episode_number: EpisodeNumber


CatalogItem = Track | Episode
"""Closed union of every concrete catalog item type."""

Release.model_rebuild()
