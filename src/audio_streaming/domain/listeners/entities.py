"""Listener profiles with their likes and playlists."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from audio_streaming.domain.catalog.entities import AudioItem
from audio_streaming.domain.playback.value_objects import NO_SELECTION
from audio_streaming.domain.shared.exceptions import BusinessRuleViolationError, ValidationError
from audio_streaming.domain.shared.messages import ErrorMessages
from audio_streaming.domain.shared.types import CursorInt, EmailStr, NonEmptyStr
from audio_streaming.domain.shared.value_objects import ListenerId, ListenerIdField


class Playlist(BaseModel):
    """Named, ordered collection of catalog items. Duplicates are rejected."""

    model_config = ConfigDict(validate_assignment=True)

    name: NonEmptyStr
    items: list[AudioItem] = Field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.items)

    def add_item(self, item: AudioItem) -> bool:
        if item in self.items:
            return False
        self.items.append(item)
        return True

    def remove_item(self, item: AudioItem) -> bool:
        if item not in self.items:
            return False
        self.items.remove(item)
        return True

    def item_list(self) -> list[AudioItem]:
        return list(self.items)

    def __str__(self) -> str:
        return f"Playlist: {self.name} ({len(self.items)} items)"


class Listener(BaseModel):
    """A user profile. Holds no credentials.

    ``likes`` is a set under title equality, so two items sharing a variant
    and a title count as one like.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: ListenerIdField = Field(default_factory=ListenerId.new)
    email: EmailStr
    display_name: NonEmptyStr
    likes: set[AudioItem] = Field(default_factory=set)
    playlists: list[Playlist] = Field(default_factory=list)
    saved_queue_position: CursorInt = NO_SELECTION

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v: str) -> str:
        return v.strip()

    def toggle_like(self, item: AudioItem) -> bool:
        """Like ``item`` or withdraw an existing like.

        Returns:
            True if the item is now liked, False if the like was removed.
        """
        if item in self.likes:
            self.likes.discard(item)
            item.unlike()
            return False

        self.likes.add(item)
        item.like()
        return True

    def has_liked(self, item: AudioItem) -> bool:
        return item in self.likes

    def liked_items(self) -> list[AudioItem]:
        return sorted(self.likes, key=lambda item: item.title.casefold())

    def create_playlist(self, name: str) -> Playlist:
        name = name.strip()
        if not name:
            raise ValidationError(ErrorMessages.EMPTY_PLAYLIST_NAME, field="name")
        if self.find_playlist(name) is not None:
            raise BusinessRuleViolationError(
                "unique_playlist_name",
                ErrorMessages.PLAYLIST_ALREADY_EXISTS.format(name=name),
            )
        playlist = Playlist(name=name)
        self.playlists.append(playlist)
        return playlist

    def find_playlist(self, name: str) -> Playlist | None:
        wanted = name.strip().casefold()
        for playlist in self.playlists:
            if playlist.name.casefold() == wanted:
                return playlist
        return None

    def remove_playlist(self, name: str) -> bool:
        playlist = self.find_playlist(name)
        if playlist is None:
            return False
        self.playlists.remove(playlist)
        return True

    def __str__(self) -> str:
        return f"{self.display_name} <{self.email}>"
