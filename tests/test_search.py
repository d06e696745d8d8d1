from core.search import SearchSession
from core.song_list import SongListView
from db.models import Song


def test_session_typing_only_while_active():
    session = SearchSession()
    session.append("x")
    assert session.query == ""

    session.activate()
    session.append("ab")
    session.backspace()
    assert session.query == "a"

    session.deactivate()
    assert (session.active, session.query) == (False, "")


def test_toggle_survives_activation():
    session = SearchSession()
    assert session.toggle_link_filter() is True
    session.activate()
    assert session.link_only_filter
    session.deactivate()
    assert session.link_only_filter


def test_search_narrows_then_restores(sample_songs):
    view = SongListView(sample_songs)
    view.open_search()
    assert view.search.active and view.search.query == ""

    view.type_text("gra")
    assert [s.title for s in view.visible] == ["Amazing Grace"]

    view.close_search()
    assert not view.search.active
    assert view.search.query == ""
    assert view.visible == tuple(sample_songs)


def test_closing_search_keeps_link_filter(sample_songs):
    view = SongListView(sample_songs)
    view.toggle_link_filter()
    view.open_search()
    view.type_text("gra")
    assert view.visible == ()
    view.close_search()
    assert [s.title for s in view.visible] == ["Ave Maria"]


def test_cursor_clamps_when_results_vanish(sample_songs):
    view = SongListView(sample_songs)
    view.move_selection(1)
    assert view.selected == 1

    view.open_search()
    view.type_text("no such song")
    assert view.visible == ()
    assert view.selected == 0
    assert view.current_song() is None


def test_cursor_clamps_after_reload(sample_songs):
    view = SongListView(sample_songs)
    view.select_last()
    view.set_songs(sample_songs[:1])
    assert view.selected == 0
    assert view.current_song() == sample_songs[0]


def test_page_and_ends():
    view = SongListView(Song(i, f"Song {i:02d}") for i in range(12))
    view.page_down()
    assert view.selected == 5
    view.page_down()
    view.page_down()
    assert view.selected == 11
    view.page_up()
    assert view.selected == 6
    view.select_first()
    assert view.selected == 0
    view.select_last()
    assert view.selected == 11
