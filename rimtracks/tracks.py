"""Track lists parsed from timestamp files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

_SECONDS_PER_UNIT = 60
_UINT32_MASK = 0xFFFFFFFF
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class TracksError(Exception):
    """Raised when a timestamp file cannot be read."""


@dataclass
class Track:
    """A titled span of a music file, in whole seconds."""

    title: str
    start: int
    stop: int = 0


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def time_from_seconds(seconds: int) -> str:
    """Format seconds as ``M:SS`` or, from one hour on, ``H:MM:SS``."""
    if seconds < 0:
        raise ValueError(f"seconds must not be negative, got {seconds}")
    minutes, secs = divmod(seconds, _SECONDS_PER_UNIT)
    if minutes >= _SECONDS_PER_UNIT:
        hours, minutes = divmod(minutes, _SECONDS_PER_UNIT)
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def seconds_from_time(time: str) -> int:
    """Parse up to three colon-separated fields (``[[H:]M:]S``) into seconds."""
    parts: list[int] = []
    rest = time
    while len(parts) < 3 and rest:
        chunk, _, rest = rest.partition(":")
        parts.append(_atoi(chunk))
    total = 0
    for value in parts:
        total = total * _SECONDS_PER_UNIT + value
    return total & _UINT32_MASK


@dataclass
class Tracks:
    """An ordered list of tracks belonging to one music file."""

    items: list[Track] = field(default_factory=list)
    music_file: str | None = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Track]:
        return iter(self.items)

    def get(self, index: int) -> Track:
        """Return the track at ``index``; raise IndexError if there is none."""
        if index < 0:
            raise IndexError(f"track index must not be negative, got {index}")
        return self.items[index]

    def get_inbound(self, index: int) -> Track | None:
        """Return the track at ``index``, or None when out of range."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def first(self) -> Track | None:
        return self.items[0] if self.items else None

    def last(self) -> Track | None:
        return self.items[-1] if self.items else None

    def set_end_time(self, seconds: int) -> bool:
        """Set the stop time of the last track; true if set to a non-zero value."""
        track = self.last()
        if track is None:
            return False
        track.stop = seconds
        return bool(seconds)

    @classmethod
    def parse(cls, text: str) -> Tracks:
        """Parse ``time<TAB>title`` lines; an empty line ends the list."""
        tracks = cls()
        for line in text.split("\n"):
            if not line:
                break
            time, _, title = line.partition("\t")
            tracks.items.append(Track(title=title, start=seconds_from_time(time)))
        for prev, nxt in zip(tracks.items, tracks.items[1:]):
            prev.stop = nxt.start
        return tracks

    @classmethod
    def read_from_file(cls, path: str | Path) -> Tracks:
        """Read and parse a timestamp file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise TracksError(f"Could not read file {path}: {exc}") from exc
        return cls.parse(data.decode("utf-8", errors="replace"))