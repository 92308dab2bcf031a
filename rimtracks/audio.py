"""Playback of single tracks from a long music file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402
import pygame.sndarray  # noqa: E402

from .paths import timestamps_file_for  # noqa: E402
from .tracks import Track, Tracks, TracksError  # noqa: E402

log = logging.getLogger(__name__)

SAMPLE_SIZE = -16
CHANNEL_COUNT = 2
SAMPLE_RATE = 48000
CHUNK_SIZE = 1 << 11


class AudioError(Exception):
    """Raised when the audio device or a music file fails."""


@dataclass
class Music:
    """A decoded music file together with its track list."""

    tracks: Tracks
    samples: np.ndarray = field(repr=False)
    sample_rate: int

    @property
    def frame_count(self) -> int:
        return int(self.samples.shape[0]) if self.samples.ndim else 0


class Player:
    """A playback device that loops one selected track at a time."""

    def __init__(self) -> None:
        try:
            pygame.mixer.init(
                frequency=SAMPLE_RATE,
                size=SAMPLE_SIZE,
                channels=CHANNEL_COUNT,
                buffer=CHUNK_SIZE,
                allowedchanges=0,
            )
        except pygame.error as exc:
            raise AudioError(f"Failed to initialize play device: {exc}") from exc
        frequency, _, _ = pygame.mixer.get_init()
        self.sample_rate: int = frequency
        self._closed = False
        self._music: Music | None = None
        self._track: Track | None = None
        self._sound: pygame.mixer.Sound | None = None
        self._channel: pygame.mixer.Channel | None = None
        self._playing = False

    @property
    def current_track(self) -> Track | None:
        return self._track

    @property
    def current_music(self) -> Music | None:
        return self._music

    @property
    def is_playing(self) -> bool:
        return self._playing

    def close(self) -> None:
        if self._closed:
            return
        self._stop_channel()
        self._playing = False
        pygame.mixer.quit()
        self._closed = True

    def __enter__(self) -> Player:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def load_tracks(self, file_path: str) -> Music:
        """Load a music file and the track list from its timestamp file."""
        try:
            timestamps_file = timestamps_file_for(file_path)
            tracks = Tracks.read_from_file(timestamps_file)
        except (ValueError, TracksError) as exc:
            raise AudioError(str(exc)) from exc
        tracks.music_file = file_path

        try:
            sound = pygame.mixer.Sound(file_path)
        except (pygame.error, OSError) as exc:
            raise AudioError(f"Failed to load music file `{file_path}`: {exc}") from exc
        log.info("Opened `%s`", file_path)
        log.info("Opened `%s`", timestamps_file)

        samples = pygame.sndarray.array(sound)
        music = Music(tracks=tracks, samples=samples, sample_rate=self.sample_rate)
        tracks.set_end_time(music.frame_count // music.sample_rate)
        return music

    def unload_tracks(self, music: Music) -> None:
        """Release a loaded music file; stops playback if it is playing."""
        if self._music is music:
            self._stop_channel()
            self._music = None
            self._track = None
            self._sound = None
            self._playing = False
        music.tracks.items.clear()
        music.samples = np.empty((0, CHANNEL_COUNT), dtype=music.samples.dtype)

    def select_track(self, music: Music, index: int) -> None:
        """Make the track at ``index`` the looping range of playback."""
        track = music.tracks.get(index)
        rate = music.sample_rate
        segment = np.ascontiguousarray(music.samples[track.start * rate : track.stop * rate])
        if segment.shape[0] == 0:
            raise AudioError(f"Track {index} `{track.title}` holds no audio")
        try:
            sound = pygame.sndarray.make_sound(segment)
        except (pygame.error, ValueError) as exc:
            raise AudioError(f"Failed to prepare track {index}: {exc}") from exc

        self._stop_channel()
        self._music = music
        self._track = track
        self._sound = sound
        if self._playing:
            self._start_channel()
        log.info("Selected song %d: `%s`", index, track.title)

    def unpause(self) -> bool:
        """Start or resume playback; false when no track is selected."""
        if self._track is None:
            return False
        if self._channel is None:
            self._start_channel()
        else:
            self._channel.unpause()
        self._playing = True
        return True

    def pause(self) -> bool:
        """Pause playback; false when no track is selected."""
        if self._track is None:
            return False
        if self._channel is not None:
            self._channel.pause()
        self._playing = False
        return True

    def restart(self) -> None:
        """Go back to the start of the selected track."""
        if self._track is None or self._music is None:
            return
        self._stop_channel()
        if self._playing:
            self._start_channel()

    def _start_channel(self) -> None:
        assert self._sound is not None
        channel = self._sound.play(loops=-1)
        if channel is None:
            raise AudioError("Failed to start playback audio device")
        self._channel = channel

    def _stop_channel(self) -> None:
        if self._channel is not None:
            self._channel.stop()
            self._channel = None