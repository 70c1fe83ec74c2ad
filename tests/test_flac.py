import pytest

from muplayer.flac import FlacError, read_metadata, read_metadata_raw


def _le32(n):
    return n.to_bytes(4, "little")


def _flac_bytes(comments, *, with_comments=True):
    streaminfo = bytes([0x00]) + (34).to_bytes(3, "big") + bytes(34)
    if not with_comments:
        padding = bytes([0x81]) + (4).to_bytes(3, "big") + bytes(4)
        return b"fLaC" + streaminfo + padding
    vendor = b"reference"
    encoded = [c if isinstance(c, bytes) else c.encode("utf-8") for c in comments]
    body = _le32(len(vendor)) + vendor + _le32(len(encoded))
    body += b"".join(_le32(len(c)) + c for c in encoded)
    block = bytes([0x84]) + len(body).to_bytes(3, "big") + body
    return b"fLaC" + streaminfo + block


@pytest.fixture
def write_flac(tmp_path):
    def write(comments, name="song.flac", **kwargs):
        path = tmp_path / name
        path.write_bytes(_flac_bytes(comments, **kwargs))
        return path

    return write


def test_reads_tags(write_flac):
    path = write_flac(
        [
            "TITLE=Dirty Realism",
            "ALBUM=An Anxious Object",
            "ARTIST=Mouse",
            "TRACKNUMBER=4",
            "DISCNUMBER=2",
        ]
    )
    song = read_metadata(path)
    assert song.title == "Dirty Realism"
    assert song.album == "An Anxious Object"
    assert song.artist == "Mouse"
    assert (song.track_number, song.disc_number) == (4, 2)
    assert song.path == str(path)
    assert song.gain == 0.0


def test_defaults_without_tags(write_flac):
    song = read_metadata(write_flac([]))
    assert (song.title, song.album, song.artist) == (
        "Unknown Title",
        "Unknown Album",
        "Unknown Artist",
    )


def test_album_artist_wins_over_artist(write_flac):
    song = read_metadata(write_flac(["albumartist=Band", "artist=Singer"]))
    assert song.artist == "Band"


def test_album_artist_overrides_earlier_artist(write_flac):
    song = read_metadata(write_flac(["artist=Singer", "AlbumArtist=Band"]))
    assert song.artist == "Band"


def test_unparsable_track_number_falls_back(write_flac):
    song = read_metadata(write_flac(["TRACKNUMBER=3/12", "DISCNUMBER=x"]))
    assert (song.track_number, song.disc_number) == (1, 1)


def test_replay_gain(write_flac):
    song = read_metadata(write_flac(["REPLAYGAIN_TRACK_GAIN=-20.00 dB"]))
    assert song.gain == pytest.approx(0.1)


def test_replay_gain_too_short_ignored(write_flac):
    song = read_metadata(write_flac(["REPLAYGAIN_TRACK_GAIN=dB"]))
    assert song.gain == 0.0


def test_raw_keys_upper_cased(write_flac):
    tags = read_metadata_raw(write_flac(["title=Name", "Album=Record", "EMPTY"]))
    assert tags == {"TITLE": "Name", "ALBUM": "Record", "EMPTY": ""}


def test_raw_later_duplicate_wins(write_flac):
    tags = read_metadata_raw(write_flac(["TITLE=one", "title=two"]))
    assert tags["TITLE"] == "two"


def test_not_flac(tmp_path):
    path = tmp_path / "x.flac"
    path.write_bytes(b"OggS and more")
    with pytest.raises(FlacError, match="File is not FLAC"):
        read_metadata(path)


def test_no_comment_block(write_flac):
    with pytest.raises(FlacError, match="Could not parse metadata"):
        read_metadata(write_flac([], with_comments=False))


def test_truncated_file(tmp_path):
    path = tmp_path / "x.flac"
    path.write_bytes(_flac_bytes(["TITLE=abc"])[:-2])
    with pytest.raises(FlacError):
        read_metadata(path)


def test_invalid_utf8_comment(write_flac):
    with pytest.raises(FlacError):
        read_metadata(write_flac([b"TITLE=\xff\xfe"]))


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_metadata(tmp_path / "missing.flac")