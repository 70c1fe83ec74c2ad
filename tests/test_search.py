import pytest

from muplayer.database import AlbumItem, ArtistItem, Database, SongItem
from muplayer.search import Search, SearchMode
from muplayer.song import Song


@pytest.fixture
def db():
    return Database(
        [
            Song("Two", "Album", "Artist", 1, 2, "two.flac", 0.0),
            Song("One", "Album", "Artist", 1, 1, "one.flac", 0.0),
        ]
    )


def test_new_search_is_empty():
    search = Search()
    assert search.query == ""
    assert search.mode is SearchMode.SEARCH
    assert len(search.results) == 0
    assert search.query_changed is False


def test_refresh_without_change_keeps_results(db):
    search = Search()
    search.refresh(db)
    assert len(search.results) == 0


def test_type_and_refresh_finds_song(db):
    search = Search()
    for c in "one":
        search.type_char(c)
    assert search.query == "one"
    assert search.query_changed is True
    search.refresh(db)
    assert search.query_changed is False
    assert search.results[0] == SongItem("Artist", "Album", "One", 1, 1)


def test_type_char_ignored_in_select_mode():
    search = Search()
    search.mode = SearchMode.SELECT
    search.type_char("x")
    assert search.query == ""


def test_empty_query_lists_everything(db):
    search = Search()
    search.query_changed = True
    search.refresh(db)
    assert search.results.to_list() == db.search("")


def test_backspace_removes_last_char():
    search = Search()
    search.query = "hello world"
    search.on_backspace(False, False)
    assert search.query == "hello worl"
    assert search.query_changed is True


def test_control_backspace_removes_last_word():
    search = Search()
    search.query = "hello world  "
    search.on_backspace(True, False)
    assert search.query == "hello "


def test_control_backspace_single_word_clears():
    search = Search()
    search.query = "hello"
    search.on_backspace(True, False)
    assert search.query == ""


def test_control_shift_backspace_clears():
    search = Search()
    search.query = "hello world"
    search.on_backspace(True, True)
    assert search.query == ""


def test_backspace_on_empty_query_does_nothing():
    search = Search()
    search.on_backspace(False, False)
    assert search.query == ""
    assert search.query_changed is False


def test_backspace_in_select_mode_returns_to_typing(db):
    search = Search()
    search.query_changed = True
    search.refresh(db)
    search.on_enter(db)
    assert search.mode is SearchMode.SELECT
    search.on_backspace(False, False)
    assert search.mode is SearchMode.SEARCH
    assert search.results.index is None


def test_enter_with_no_results_stays_in_search(db):
    search = Search()
    assert search.on_enter(db) is None
    assert search.mode is SearchMode.SEARCH


def test_enter_on_song_result(db):
    search = Search()
    search.query_changed = True
    search.refresh(db)
    assert search.on_enter(db) is None
    assert search.mode is SearchMode.SELECT
    assert search.results.index == 0
    item = search.results.selected()
    assert isinstance(item, SongItem)
    songs = search.on_enter(db)
    assert songs == [db.song(item.artist, item.album, item.disc, item.number)]


def test_enter_on_album_and_artist_results(db):
    search = Search()
    search.query_changed = True
    search.refresh(db)
    search.on_enter(db)

    album_pos = next(i for i, it in enumerate(search.results) if isinstance(it, AlbumItem))
    search.results.select(album_pos)
    album_songs = search.on_enter(db)
    assert album_songs == db.album("Artist", "Album").songs
    assert [s.track_number for s in album_songs] == [1, 2]

    artist_pos = next(i for i, it in enumerate(search.results) if isinstance(it, ArtistItem))
    search.results.select(artist_pos)
    assert search.on_enter(db) == album_songs