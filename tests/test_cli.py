import io
import wave

import pytest

from rimtracks.cli import main


@pytest.fixture
def music_path(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    music = tmp_path / "music" / "RimWorld OST.mp3"
    music.parent.mkdir()
    with wave.open(str(music), "wb") as out:
        out.setnchannels(2)
        out.setsampwidth(2)
        out.setframerate(48000)
        out.writeframes(b"\x00\x00" * 2 * 48000 * 3)
    stamps = tmp_path / "timestamps" / "rimworld.time"
    stamps.parent.mkdir()
    stamps.write_text("0:00\tFirst\n0:01\tSecond\n", encoding="utf-8")
    return music.as_posix()


def test_missing_argument(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_plays_until_input(music_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([music_path, "1"]) == 0


def test_non_numeric_index_selects_first(music_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([music_path, "abc"]) == 0


def test_index_out_of_range(music_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([music_path, "7"]) == 1


def test_unknown_music_file(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    assert main([(tmp_path / "music" / "other.mp3").as_posix()]) == 1