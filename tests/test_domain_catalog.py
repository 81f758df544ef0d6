"""
Unit Tests for Domain Catalog Layer

Tests for:
- Value Objects: ItemId, Popularity, ItemKind
- Entities: Author, Release, Track, Episode
- Domain Services: PopularityRanking
"""

import pytest
from pydantic import ValidationError

from audio_streaming.domain.catalog.entities import Author, Episode, Release, Track
from audio_streaming.domain.catalog.services import PopularityRanking
from audio_streaming.domain.catalog.value_objects import ItemKind, Popularity, normalize_term
from audio_streaming.domain.shared.value_objects import ItemId

# =============================================================================
# Identifier Tests
# =============================================================================


class TestItemId:
    """Unit tests for the ItemId value object."""

    def test_create_valid_item_id(self):
        """Should keep the given value."""
        item_id = ItemId("abc-123")
        assert item_id.value == "abc-123"
        assert str(item_id) == "abc-123"

    def test_create_empty_raises_error(self):
        """Should raise ValueError for an empty id."""
        with pytest.raises(ValueError, match="cannot be empty"):
            ItemId("")

    def test_create_whitespace_raises_error(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            ItemId("   ")

    def test_new_generates_unique_ids(self):
        """Should generate a fresh id per call."""
        assert ItemId.new() != ItemId.new()

    def test_item_id_hashable(self):
        """Equal ids should collapse in a set."""
        assert len({ItemId("a"), ItemId("a"), ItemId("b")}) == 2

    def test_items_receive_generated_ids(self, bohemian_rhapsody, love_of_my_life):
        assert isinstance(bohemian_rhapsody.id, ItemId)
        assert bohemian_rhapsody.id != love_of_my_life.id


# =============================================================================
# Popularity Value Object Tests
# =============================================================================


class TestPopularity:
    """Unit tests for the Popularity value object."""

    def test_sort_key_negates_counters(self):
        assert Popularity(likes=3, plays=7).sort_key == (-3, -7)

    def test_more_likes_sorts_first(self):
        """Likes dominate plays."""
        assert Popularity(likes=2, plays=0).sort_key < Popularity(likes=1, plays=100).sort_key

    def test_str(self):
        assert str(Popularity(likes=1, plays=4)) == "Plays: 4 | Likes: 1"

    def test_normalize_term_is_case_insensitive(self):
        assert normalize_term("QuEeN") == normalize_term("queen")


# =============================================================================
# Author and Release Entity Tests
# =============================================================================


class TestAuthor:
    """Unit tests for the Author entity."""

    def test_genres_are_deduplicated(self):
        author = Author(name="Daft Punk")
        author.add_genre("House")
        author.add_genre("Electronic")
        author.add_genre("House")
        assert author.genre_list() == ["Electronic", "House"]

    def test_identity_is_id_not_name(self):
        """Two authors with the same name are different entities."""
        assert Author(name="Queen") != Author(name="Queen")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Author(name="")

    def test_str_is_name(self, queen):
        assert str(queen) == "Queen"


class TestRelease:
    """Unit tests for the Release entity."""

    def test_tracks_keep_insertion_order(
        self, night_at_the_opera, bohemian_rhapsody, love_of_my_life
    ):
        assert night_at_the_opera.track_list() == [bohemian_rhapsody, love_of_my_life]
        assert night_at_the_opera.track_count == 2

    def test_track_list_is_a_copy(self, night_at_the_opera, bohemian_rhapsody):
        night_at_the_opera.track_list().clear()
        assert night_at_the_opera.track_count == 1

    def test_str(self, night_at_the_opera):
        assert str(night_at_the_opera) == "A Night at the Opera (1975) - Queen"

    def test_invalid_year_rejected(self, queen):
        with pytest.raises(ValidationError):
            Release(title="Demo", author=queen, year=99)


# =============================================================================
# Track and Episode Entity Tests
# =============================================================================


class TestAudioItem:
    """Unit tests for the shared AudioItem behavior."""

    def test_kind_tags(self, bohemian_rhapsody, tech_news):
        assert bohemian_rhapsody.kind is ItemKind.TRACK
        assert tech_news.kind is ItemKind.EPISODE

    def test_counters_start_at_zero(self, bohemian_rhapsody):
        assert bohemian_rhapsody.play_count == 0
        assert bohemian_rhapsody.like_count == 0

    def test_increment_play(self, bohemian_rhapsody):
        bohemian_rhapsody.increment_play()
        bohemian_rhapsody.increment_play()
        assert bohemian_rhapsody.play_count == 2

    def test_like_and_unlike(self, bohemian_rhapsody):
        bohemian_rhapsody.like()
        bohemian_rhapsody.like()
        bohemian_rhapsody.unlike()
        assert bohemian_rhapsody.like_count == 1

    def test_unlike_never_goes_negative(self, bohemian_rhapsody):
        """Should floor the like counter at zero."""
        bohemian_rhapsody.unlike()
        assert bohemian_rhapsody.like_count == 0

    def test_negative_counter_assignment_rejected(self, bohemian_rhapsody):
        with pytest.raises(ValidationError):
            bohemian_rhapsody.play_count = -1

    def test_empty_title_rejected(self, queen):
        with pytest.raises(ValidationError):
            Track(title="", duration_seconds=10, author=queen)

    def test_negative_duration_rejected(self, queen):
        with pytest.raises(ValidationError):
            Track(title="Oops", duration_seconds=-1, author=queen)

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0, "0:00"), (59, "0:59"), (354, "5:54"), (3600, "1:00:00"), (3725, "1:02:05")],
    )
    def test_duration_formatted(self, queen, seconds, expected):
        track = Track(title="T", duration_seconds=seconds, author=queen)
        assert track.duration_formatted == expected

    def test_popularity_reflects_counters(self, bohemian_rhapsody):
        bohemian_rhapsody.like()
        bohemian_rhapsody.increment_play()
        bohemian_rhapsody.increment_play()
        assert bohemian_rhapsody.popularity == Popularity(likes=1, plays=2)


class TestFormattedDetails:
    """Tests for the variant-tagged descriptions."""

    def test_track_details(self, bohemian_rhapsody):
        assert bohemian_rhapsody.formatted_details() == "[Track] Bohemian Rhapsody (Queen)"

    def test_episode_details(self, tech_news):
        assert tech_news.formatted_details() == "[Episode] Tech News #1 with TechDaily"

    def test_str_appends_counters(self, bohemian_rhapsody):
        bohemian_rhapsody.like()
        assert str(bohemian_rhapsody) == (
            "[Track] Bohemian Rhapsody (Queen) | Plays: 0 | Likes: 1"
        )


class TestItemEquality:
    """Items compare by variant and title."""

    def test_same_title_different_author_are_equal(self, queen, catalog):
        other_author = catalog.get_or_create_author("Cover Band")
        original = Track(title="Bohemian Rhapsody", duration_seconds=354, author=queen)
        cover = Track(title="Bohemian Rhapsody", duration_seconds=300, author=other_author)
        assert original == cover
        assert hash(original) == hash(cover)

    def test_different_titles_are_not_equal(self, bohemian_rhapsody, love_of_my_life):
        assert bohemian_rhapsody != love_of_my_life

    def test_track_never_equals_episode(self, queen):
        track = Track(title="Same", duration_seconds=10, author=queen)
        episode = Episode(title="Same", duration_seconds=10, host="Host", episode_number=1)
        assert track != episode

    def test_equal_items_collapse_in_set(self, queen):
        first = Track(title="Dup", duration_seconds=10, author=queen)
        second = Track(title="Dup", duration_seconds=20, author=queen)
        assert len({first, second}) == 1


class TestTrack:
    """Unit tests for Track-specific accessors."""

    def test_release_title(self, bohemian_rhapsody):
        assert bohemian_rhapsody.release_title == "A Night at the Opera"
        assert not bohemian_rhapsody.is_single

    def test_single_has_no_release(self, queen):
        single = Track(title="Single Song", duration_seconds=200, author=queen)
        assert single.is_single
        assert single.release_title == "Single"

    def test_author_name(self, bohemian_rhapsody):
        assert bohemian_rhapsody.author_name == "Queen"


# =============================================================================
# PopularityRanking Domain Service Tests
# =============================================================================


class TestPopularityRanking:
    """Unit tests for the popularity ranking rules."""

    def test_rank_orders_by_likes_then_plays(self, make_track):
        a = make_track("A", likes=1, plays=10)
        b = make_track("B", likes=3, plays=0)
        c = make_track("C", likes=1, plays=20)
        assert PopularityRanking.rank([a, b, c]) == [b, c, a]

    def test_rank_is_stable_for_ties(self, make_track):
        """Items tied on both counters keep their input order."""
        items = [make_track(f"T{i}") for i in range(5)]
        ranked = PopularityRanking.rank(items)
        assert [item.title for item in ranked] == ["T0", "T1", "T2", "T3", "T4"]

    def test_rank_does_not_mutate_input(self, make_track):
        items = [make_track("A"), make_track("B", likes=2)]
        PopularityRanking.rank(items)
        assert [item.title for item in items] == ["A", "B"]

    def test_top_limits_result(self, make_track):
        items = [make_track(f"T{i}", likes=i) for i in range(8)]
        top = PopularityRanking.top(items)
        assert len(top) == PopularityRanking.DEFAULT_RECOMMENDATION_LIMIT
        assert top[0].title == "T7"

    def test_top_with_fewer_items(self, make_track):
        items = [make_track("Only")]
        assert PopularityRanking.top(items, 5) == items

    def test_is_ranked(self, make_track):
        a = make_track("A", likes=2)
        b = make_track("B", likes=1)
        assert PopularityRanking.is_ranked([a, b])
        assert not PopularityRanking.is_ranked([b, a])
