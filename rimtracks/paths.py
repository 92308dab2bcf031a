"""Locating the timestamp file that belongs to a music file."""

from __future__ import annotations

TIMESTAMPS_FOLDER = "timestamps/"
MUSIC_FOLDER = "music/"

MUSIC_TO_TIMESTAMPS = {
    "RimWorld OST.mp3": "rimworld.time",
    "RimWorld Royalty OST.mp3": "rimworld_royalty.time",
    "RimWorld Anomaly OST.mp3": "rimworld_anomaly.time",
}


def music_file_get_name(music_file: str) -> str:
    """Return the part of the path after the last ``/``."""
    return music_file.rpartition("/")[2]


def timestamps_from_music_name(music_file: str) -> str | None:
    """Return the timestamp file name for a known music file, else None."""
    return MUSIC_TO_TIMESTAMPS.get(music_file_get_name(music_file))


def get_relative_path_to_music(music_file: str) -> str:
    """Return the directory above the one holding the music file, with a trailing ``/``."""
    head, sep, _ = music_file.rpartition("/")
    # Without a directory part the fallback is "../", cut to the path's length.
    directory = head if sep else "../"[: len(music_file)]
    parent, sep, _ = directory.rpartition("/")
    return parent + sep if sep else ""


def timestamps_file_for(music_file: str) -> str:
    """Return the path of the timestamp file for ``music_file``."""
    name = timestamps_from_music_name(music_file)
    if name is None:
        raise ValueError(f"No timestamps known for `{music_file_get_name(music_file)}`")
    return get_relative_path_to_music(music_file) + TIMESTAMPS_FOLDER + name