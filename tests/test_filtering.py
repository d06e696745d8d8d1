import pytest

from core.filtering import filter_songs, has_link, matches_query
from db.models import Song

LIBRARY = [
    Song(1, "Ave Maria", "Bach", ""),
    Song(2, "Amazing Grace", "Unknown", "http://x"),
    Song(3, "Jesu, Joy of Man's Desiring", "J.S. Bach", "https://example.com/jesu"),
    Song(4, "Locus Iste", "Bruckner", "   "),
    Song(5, "Bachianas", "", ""),
]


def test_query_matches_title(sample_songs):
    result = filter_songs(sample_songs, "ave", False)
    assert [s.title for s in result] == ["Ave Maria"]


def test_link_filter_keeps_songs_without_links(sample_songs):
    result = filter_songs(sample_songs, "", True)
    assert result == (Song(1, "Ave Maria", "Bach", ""),)


def test_query_matches_composer():
    assert [s.id for s in filter_songs(LIBRARY, "bruck")] == [4]


def test_whitespace_link_counts_as_missing():
    assert not has_link(LIBRARY[3])
    assert [s.id for s in filter_songs(LIBRARY, "", True)] == [1, 4, 5]


def test_query_and_link_filter_combine():
    assert [s.id for s in filter_songs(LIBRARY, "bach", True)] == [1, 5]


def test_blank_query_matches_everything():
    assert matches_query(LIBRARY[0], "")
    assert matches_query(LIBRARY[0], "   ")
    assert filter_songs(LIBRARY, "  ") == tuple(LIBRARY)


def test_order_is_preserved():
    shuffled = [LIBRARY[4], LIBRARY[0], LIBRARY[2]]
    assert list(filter_songs(shuffled, "bach")) == shuffled


def test_empty_input():
    assert filter_songs([], "anything", True) == ()


@pytest.mark.parametrize("query", ["", "a", "bach", "grace", "zzz", " "])
@pytest.mark.parametrize("link_only", [False, True])
def test_filter_is_idempotent(query, link_only):
    once = filter_songs(LIBRARY, query, link_only)
    assert filter_songs(once, query, link_only) == once


@pytest.mark.parametrize("query", ["", "b", "ba", "bac", "a"])
@pytest.mark.parametrize("link_only", [False, True])
def test_longer_query_never_grows_result(query, link_only):
    for extra in "ahz ":
        assert len(filter_songs(LIBRARY, query, link_only)) >= len(
            filter_songs(LIBRARY, query + extra, link_only)
        )


def test_case_insensitive():
    expected = filter_songs(LIBRARY, "bach", False)
    assert filter_songs(LIBRARY, "BACH", False) == expected
    assert filter_songs(LIBRARY, "BaCh", False) == expected
    assert len(expected) == 3
