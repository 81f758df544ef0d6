import random

import pytest

# ============================================================================
# Catalog Fixtures
# ============================================================================


@pytest.fixture
def catalog():
    """Create an empty catalog index."""
    from audio_streaming.domain.catalog.index import CatalogIndex

    return CatalogIndex()


@pytest.fixture
def queen(catalog):
    """Create the Queen author through the catalog's author cache."""
    return catalog.get_or_create_author("Queen", ["Rock"])


@pytest.fixture
def night_at_the_opera(queen):
    """Create a release by Queen."""
    from audio_streaming.domain.catalog.entities import Release

    return Release(title="A Night at the Opera", author=queen, year=1975)


@pytest.fixture
def bohemian_rhapsody(queen, night_at_the_opera):
    """Create a track that belongs to a release."""
    from audio_streaming.domain.catalog.entities import Track

    track = Track(
        title="Bohemian Rhapsody",
        duration_seconds=354,
        author=queen,
        release=night_at_the_opera,
    )
    night_at_the_opera.add_track(track)
    return track


@pytest.fixture
def love_of_my_life(queen, night_at_the_opera):
    from audio_streaming.domain.catalog.entities import Track

    track = Track(
        title="Love of My Life",
        duration_seconds=219,
        author=queen,
        release=night_at_the_opera,
    )
    night_at_the_opera.add_track(track)
    return track


@pytest.fixture
def tech_news():
    """Create a podcast episode."""
    from audio_streaming.domain.catalog.entities import Episode

    return Episode(title="Tech News #1", duration_seconds=1200, host="TechDaily", episode_number=1)


@pytest.fixture
def populated_catalog(catalog, bohemian_rhapsody, love_of_my_life, tech_news):
    """Catalog holding two tracks and one episode, in that order."""
    catalog.add_items([bohemian_rhapsody, love_of_my_life, tech_news])
    return catalog


@pytest.fixture
def make_track(catalog):
    """Factory for tracks whose author goes through the catalog cache."""
    from audio_streaming.domain.catalog.entities import Track

    def _make(title: str, author: str = "Test Artist", likes: int = 0, plays: int = 0):
        return Track(
            title=title,
            duration_seconds=180,
            author=catalog.get_or_create_author(author),
            like_count=likes,
            play_count=plays,
        )

    return _make


# ============================================================================
# Playback Fixtures
# ============================================================================


@pytest.fixture
def queue():
    """Create an empty playback queue with a seeded shuffle."""
    from audio_streaming.domain.playback.queue import PlaybackQueue

    return PlaybackQueue(rng=random.Random(1234))


@pytest.fixture
def three_tracks(make_track):
    return [make_track("First"), make_track("Second"), make_track("Third")]


# ============================================================================
# Listener Fixtures
# ============================================================================


@pytest.fixture
def registry():
    from audio_streaming.domain.listeners.registry import ListenerRegistry

    return ListenerRegistry()


@pytest.fixture
def listener(registry):
    """Register a sample listener."""
    return registry.register("  Ana@Example.COM ", "Ana")


# ============================================================================
# Persistence Fixtures
# ============================================================================


@pytest.fixture
def document_store(tmp_path):
    """Create a JSON document store rooted in a temporary directory."""
    from audio_streaming.infrastructure.persistence.json_store import JsonDocumentStore

    return JsonDocumentStore(tmp_path / "data")


@pytest.fixture
def catalog_repository(document_store):
    from audio_streaming.infrastructure.persistence.repositories.catalog_repository import (
        JsonCatalogRepository,
    )

    return JsonCatalogRepository(document_store, "catalog.json")


@pytest.fixture
def listener_repository(document_store):
    from audio_streaming.infrastructure.persistence.repositories.listener_repository import (
        JsonListenerRepository,
    )

    return JsonListenerRepository(document_store, "listeners.json")


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing storage at a temporary directory."""
    from audio_streaming.config.settings import (
        PlayerSettings,
        Settings,
        StorageSettings,
    )

    return Settings(
        environment="test",
        storage=StorageSettings(data_dir=tmp_path / "data"),
        player=PlayerSettings(shuffle_seed=42),
    )
