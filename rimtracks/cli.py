"""Command line player: plays one track of a soundtrack until Enter is pressed."""

from __future__ import annotations

import logging
import re
import sys

from .audio import AudioError, Player

log = logging.getLogger("rimtracks")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_index(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _usage(program: str) -> None:
    print(f"Usage: {program} <input.mp3> [track_index]", file=sys.stderr)


def main(argv=None) -> int:
    """Run the player; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    if not argv:
        log.error("Missing input file")
        _usage("rimtracks")
        return 1
    music_file = argv[0]
    index = _parse_index(argv[1]) if len(argv) > 1 else 0

    try:
        player = Player()
    except AudioError as exc:
        log.error("%s", exc)
        return 2

    with player:
        try:
            music = player.load_tracks(music_file)
        except AudioError as exc:
            log.error("%s", exc)
            return 1
        try:
            player.select_track(music, index)
            player.unpause()
        except (IndexError, AudioError) as exc:
            log.error("Cannot play track %d: %s", index, exc)
            player.unload_tracks(music)
            return 1
        sys.stdin.read(1)
        player.unload_tracks(music)
    return 0