import pytest

from muplayer.playlist import Playlist, playlists
from muplayer.song import Song


def test_round_trip(tmp_path):
    playlist = Playlist.new("name", [Song.example(), Song.example()], tmp_path)
    text = playlist.serialize()
    assert Playlist.deserialize(text) == playlist


def test_new_selects_first_song_and_names_file(tmp_path):
    playlist = Playlist.new("name", [Song.example()], tmp_path)
    assert playlist.songs.index == 0
    assert playlist.path == tmp_path / "name.playlist"
    assert playlist.name == "name"


def test_new_escapes_name(tmp_path):
    playlist = Playlist.new("a\tb\n", [Song.example()], tmp_path)
    assert playlist.name == "a    b"


def test_save_then_list_then_delete(tmp_path):
    playlist = Playlist.new("test", [Song.example()] * 10, tmp_path)
    playlist.save()
    found = playlists(tmp_path)
    assert found == [playlist]
    assert len(found[0].songs) == 10
    playlist.delete()
    assert not playlist.path.exists()
    assert playlists(tmp_path) == []


def test_playlists_ignores_other_files(tmp_path):
    (tmp_path / "notes.txt").write_text("hello", encoding="utf-8")
    Playlist.new("mix", [Song.example()], tmp_path).save()
    assert [p.name for p in playlists(tmp_path)] == ["mix"]


@pytest.mark.parametrize("text", ["no newline", "no tab\n" + Song.example().serialize()])
def test_deserialize_invalid(text):
    with pytest.raises(ValueError):
        Playlist.deserialize(text)