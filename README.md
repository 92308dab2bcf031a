# rimtracks

rimtracks plays one track, on a loop, from a long soundtrack recording.
A plain-text timestamps file gives the start of each track.

## Installation

```
pip install .
```

Audio is decoded and played through pygame's mixer. Whether a given
file, such as an MP3, can be opened depends on what your pygame build
supports.

## Usage

```
rimtracks <input.mp3> [track_index]
```

The track at `track_index` plays on a loop. If you leave the index out,
the first track (index 0) plays. The index is read like a C integer:
leading digits count and anything else gives 0. Press Enter to stop.

Exit status:

- `0` after a normal stop
- `1` if no input file is given, if the music or timestamps file cannot
  be loaded, or if the chosen track cannot be played
- `2` if the audio device cannot be opened

Log messages are written to standard error.

### Where the timestamps file is found

The timestamps file is chosen by the music file's name:

| Music file                 | Timestamps file          |
|----------------------------|--------------------------|
| `RimWorld OST.mp3`         | `rimworld.time`          |
| `RimWorld Royalty OST.mp3` | `rimworld_royalty.time`  |
| `RimWorld Anomaly OST.mp3` | `rimworld_anomaly.time`  |

The file is read from a `timestamps/` folder that sits next to the
folder holding the music. Some examples:

- `music/RimWorld OST.mp3` → `timestamps/rimworld.time`
- `/data/music/RimWorld OST.mp3` → `/data/timestamps/rimworld.time`
- `RimWorld OST.mp3` → `../timestamps/rimworld.time`

## Timestamps format

Each line holds a start time, a tab, and the track title:

```
0:00	Main Theme
3:12	Second Song
1:02:45	Late Track
```

- A start time is written as `s`, `m:ss` or `h:mm:ss`. Only the first
  three colon-separated fields are read.
- Each track ends where the next one starts.
- The last track ends at the end of the audio.
- Reading stops at the first empty line.

## Library use

```python
from rimtracks.tracks import Tracks, time_from_seconds, seconds_from_time
from rimtracks.paths import timestamps_file_for
from rimtracks.audio import Player

tracks = Tracks.parse("0:00\tIntro\n1:30\tOutro\n")
print(tracks.first().title, time_from_seconds(tracks.get(1).start))  # Intro 1:30
print(seconds_from_time("1:02:45"))                                  # 3765
print(timestamps_file_for("music/RimWorld OST.mp3"))                 # timestamps/rimworld.time

with Player() as player:
    music = player.load_tracks("music/RimWorld OST.mp3")
    player.select_track(music, 2)
    player.unpause()
    # ... player.pause(), player.restart() ...
    player.unload_tracks(music)
```

Library functions report failures with exceptions:

- `Tracks.read_from_file` raises `TracksError`.
- `timestamps_file_for` raises `ValueError` for an unknown music file
  name.
- `Player` methods raise `AudioError`.
- `Tracks.get` raises `IndexError` for an index that does not exist.

## What it does not do

- Only the three music file names listed above are recognised. There is
  no way to name a timestamps file directly.
- The command plays a single track. It has no way to list tracks or to
  move to the next one.
- It does not stop at the end of a track. The selected track loops until
  you press Enter.

## Running the tests

```
pip install .[test]
pytest
```