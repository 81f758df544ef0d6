"""Pydantic record models describing the persisted JSON documents.

Entities are flattened: authors and releases are stored once and referenced
by id, and listener data refers to catalog items by item id.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from audio_streaming.domain.shared.types import (
    CursorInt,
    DurationSeconds,
    EpisodeNumber,
    NonEmptyStr,
    NonNegativeInt,
    ReleaseYear,
    TitleStr,
)

SCHEMA_VERSION = 1


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AuthorRecord(_Record):
    id: NonEmptyStr
    name: NonEmptyStr
    genres: list[str] = Field(default_factory=list)


class ReleaseRecord(_Record):
    id: NonEmptyStr
    title: TitleStr
    author_id: NonEmptyStr
    year: ReleaseYear
    track_ids: list[str] = Field(default_factory=list)


class _ItemRecord(_Record):
    id: NonEmptyStr
    title: TitleStr
    duration_seconds: DurationSeconds
    play_count: NonNegativeInt = 0
    like_count: NonNegativeInt = 0


class TrackRecord(_ItemRecord):
    kind: Literal["track"] = "track"
    author_id: NonEmptyStr
    release_id: str | None = None


class EpisodeRecord(_ItemRecord):
    kind: Literal["episode"] = "episode"
    host: NonEmptyStr
    episode_number: EpisodeNumber


ItemRecord = Annotated[TrackRecord | EpisodeRecord, Field(discriminator="kind")]


class CatalogDocument(_Record):
    schema_version: int = SCHEMA_VERSION
    authors: list[AuthorRecord] = Field(default_factory=list)
    releases: list[ReleaseRecord] = Field(default_factory=list)
    items: list[ItemRecord] = Field(default_factory=list)


class PlaylistRecord(_Record):
    name: NonEmptyStr
    item_ids: list[str] = Field(default_factory=list)


class ListenerRecord(_Record):
    id: NonEmptyStr
    email: NonEmptyStr
    display_name: NonEmptyStr
    liked_item_ids: list[str] = Field(default_factory=list)
    playlists: list[PlaylistRecord] = Field(default_factory=list)
    saved_queue_position: CursorInt = -1


class ListenerDocument(_Record):
    schema_version: int = SCHEMA_VERSION
    listeners: list[ListenerRecord] = Field(default_factory=list)
