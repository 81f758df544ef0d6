"""
Unit Tests for Domain Listeners Layer

Tests for:
- Entities: Listener, Playlist
- Aggregate: ListenerRegistry
"""

import pytest

from audio_streaming.domain.listeners.entities import Listener, Playlist
from audio_streaming.domain.listeners.registry import ListenerRegistry
from audio_streaming.domain.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)

# =============================================================================
# Playlist Entity Tests
# =============================================================================


class TestPlaylist:
    """Unit tests for the Playlist entity."""

    def test_add_item(self, bohemian_rhapsody):
        playlist = Playlist(name="Favorites")
        assert playlist.add_item(bohemian_rhapsody) is True
        assert playlist.length == 1

    def test_add_duplicate_rejected(self, bohemian_rhapsody):
        playlist = Playlist(name="Favorites")
        playlist.add_item(bohemian_rhapsody)
        assert playlist.add_item(bohemian_rhapsody) is False
        assert playlist.length == 1

    def test_equal_title_counts_as_duplicate(self, make_track):
        """Should reject a different item carrying the same title."""
        playlist = Playlist(name="Covers")
        playlist.add_item(make_track("Song", author="Original"))
        assert playlist.add_item(make_track("Song", author="Cover")) is False

    def test_remove_item(self, bohemian_rhapsody, love_of_my_life):
        playlist = Playlist(name="Favorites")
        playlist.add_item(bohemian_rhapsody)
        playlist.add_item(love_of_my_life)

        assert playlist.remove_item(bohemian_rhapsody) is True
        assert playlist.item_list() == [love_of_my_life]
        assert playlist.remove_item(bohemian_rhapsody) is False

    def test_str(self, bohemian_rhapsody, tech_news):
        playlist = Playlist(name="Mix")
        playlist.add_item(bohemian_rhapsody)
        playlist.add_item(tech_news)
        assert str(playlist) == "Playlist: Mix (2 items)"


# =============================================================================
# Listener Entity Tests
# =============================================================================


class TestListener:
    """Unit tests for the Listener entity."""

    def test_email_is_normalized(self):
        listener = Listener(email="  Ana@Example.COM ", display_name="Ana")
        assert listener.email == "ana@example.com"

    def test_defaults(self, listener):
        assert listener.likes == set()
        assert listener.playlists == []
        assert listener.saved_queue_position == -1

    def test_toggle_like_adds_then_removes(self, listener, bohemian_rhapsody):
        assert listener.toggle_like(bohemian_rhapsody) is True
        assert bohemian_rhapsody.like_count == 1
        assert listener.has_liked(bohemian_rhapsody)

        assert listener.toggle_like(bohemian_rhapsody) is False
        assert bohemian_rhapsody.like_count == 0
        assert not listener.has_liked(bohemian_rhapsody)

    def test_likes_from_two_listeners_accumulate(self, registry, listener, bohemian_rhapsody):
        other = registry.register("bruno@example.com", "Bruno")
        listener.toggle_like(bohemian_rhapsody)
        other.toggle_like(bohemian_rhapsody)
        assert bohemian_rhapsody.like_count == 2

    def test_liked_items_sorted_by_title(self, listener, bohemian_rhapsody, love_of_my_life):
        listener.toggle_like(love_of_my_life)
        listener.toggle_like(bohemian_rhapsody)
        assert listener.liked_items() == [bohemian_rhapsody, love_of_my_life]

    def test_create_and_find_playlist(self, listener):
        playlist = listener.create_playlist("Road Trip")
        assert listener.find_playlist("road trip") is playlist
        assert listener.find_playlist("Missing") is None

    def test_duplicate_playlist_name_rejected(self, listener):
        listener.create_playlist("Road Trip")
        with pytest.raises(BusinessRuleViolationError, match="already exists"):
            listener.create_playlist("ROAD TRIP")

    def test_blank_playlist_name_rejected(self, listener):
        with pytest.raises(ValidationError):
            listener.create_playlist("   ")

    def test_remove_playlist(self, listener):
        listener.create_playlist("Old")
        assert listener.remove_playlist("old") is True
        assert listener.remove_playlist("old") is False
        assert listener.playlists == []


# =============================================================================
# ListenerRegistry Tests
# =============================================================================


class TestListenerRegistry:
    """Unit tests for listener registration and lookup."""

    def test_register_normalizes_email(self, registry):
        listener = registry.register("  Carla@Example.com ", " Carla ")
        assert listener.email == "carla@example.com"
        assert listener.display_name == "Carla"
        assert len(registry) == 1

    @pytest.mark.parametrize(
        ("email", "name"), [("", "Ana"), ("ana@example.com", ""), ("   ", "   ")]
    )
    def test_blank_fields_rejected(self, registry, email, name):
        with pytest.raises(ValidationError, match="required"):
            registry.register(email, name)

    @pytest.mark.parametrize("email", ["ana.example.com", "ana@example", "ana"])
    def test_malformed_email_rejected(self, registry, email):
        with pytest.raises(ValidationError, match="Invalid email") as exc_info:
            registry.register(email, "Ana")
        assert exc_info.value.field == "email"

    def test_duplicate_email_rejected(self, registry, listener):
        """Emails differing only by case or padding are the same account."""
        with pytest.raises(ValidationError, match="already registered"):
            registry.register("ANA@example.com  ", "Another Ana")

    def test_get_and_find(self, registry, listener):
        assert registry.get("ANA@EXAMPLE.COM") is listener
        assert registry.find("ana@example.com") is listener
        assert registry.find("nobody@example.com") is None

    def test_get_unknown_raises(self, registry):
        with pytest.raises(EntityNotFoundError) as exc_info:
            registry.get("nobody@example.com")
        assert exc_info.value.entity_type == "Listener"

    def test_remove(self, registry, listener):
        assert registry.remove("Ana@example.com") is True
        assert registry.remove("ana@example.com") is False
        assert "ana@example.com" not in registry

    def test_replace_all(self, registry, listener):
        replacement = Listener(email="zed@example.com", display_name="Zed")
        registry.replace_all([replacement])
        assert registry.all() == [replacement]
        assert registry.find("ana@example.com") is None

    def test_constructor_accepts_listeners(self):
        listener = Listener(email="a@b.co", display_name="A")
        registry = ListenerRegistry([listener])
        assert list(registry) == [listener]
