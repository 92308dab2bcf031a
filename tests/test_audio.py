import wave

import pytest

from rimtracks.audio import AudioError, Player

SECONDS = 5


def _write_wav(path, seconds, rate=48000):
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as out:
        out.setnchannels(2)
        out.setsampwidth(2)
        out.setframerate(rate)
        out.writeframes(b"\x00\x00" * 2 * rate * seconds)


@pytest.fixture
def player(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    with Player() as p:
        yield p


@pytest.fixture
def music_path(tmp_path):
    music = tmp_path / "music" / "RimWorld OST.mp3"
    _write_wav(music, SECONDS)
    stamps = tmp_path / "timestamps" / "rimworld.time"
    stamps.parent.mkdir()
    stamps.write_text("0:00\tFirst\n0:02\tSecond\n", encoding="utf-8")
    return music.as_posix()


def test_load_tracks(player, music_path):
    music = player.load_tracks(music_path)
    assert [t.title for t in music.tracks] == ["First", "Second"]
    assert music.tracks.music_file == music_path
    assert music.tracks.last().stop == SECONDS
    assert music.tracks.first().stop == music.tracks.last().start


def test_pause_without_track(player):
    assert player.pause() is False
    assert player.unpause() is False


def test_select_and_play(player, music_path):
    music = player.load_tracks(music_path)
    player.select_track(music, 1)
    assert player.current_track is music.tracks.get(1)
    assert player.unpause() is True
    assert player.is_playing is True
    player.restart()
    assert player.is_playing is True
    assert player.pause() is True
    assert player.is_playing is False


def test_select_out_of_range(player, music_path):
    music = player.load_tracks(music_path)
    with pytest.raises(IndexError):
        player.select_track(music, 2)


def test_unload(player, music_path):
    music = player.load_tracks(music_path)
    player.select_track(music, 0)
    player.unpause()
    player.unload_tracks(music)
    assert player.current_track is None
    assert len(music.tracks) == 0
    assert music.frame_count == 0


def test_missing_timestamps(player, tmp_path):
    music = tmp_path / "music" / "RimWorld OST.mp3"
    _write_wav(music, 1)
    with pytest.raises(AudioError):
        player.load_tracks(music.as_posix())


def test_unknown_music_name(player, tmp_path):
    music = tmp_path / "music" / "other.mp3"
    _write_wav(music, 1)
    with pytest.raises(AudioError):
        player.load_tracks(music.as_posix())


def test_missing_music_file(player, tmp_path):
    stamps = tmp_path / "timestamps" / "rimworld.time"
    stamps.parent.mkdir()
    stamps.write_text("0:00\tFirst\n", encoding="utf-8")
    with pytest.raises(AudioError):
        player.load_tracks((tmp_path / "music" / "RimWorld OST.mp3").as_posix())