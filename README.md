# miditones

`miditones` reads a Standard MIDI File and turns its note-on and note-off
events into a flat list of tones. Each tone has a channel, a frequency in Hz
(tuned to A4 = 443 Hz), a delay in milliseconds and a velocity. It then sends
the tones as text to a microcontroller over a serial port.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
miditones song.mid
miditones song.mid 200
miditones song.mid --port /dev/ttyUSB0 --baud 9600
```

The first argument is the MIDI file. The second argument is optional. It caps
how many tones are sent, and the default is 65535.

- `--port` sets the serial device. The default is `/dev/ttyACM0`.
- `--baud` sets the baud rate. The default is 115200. Any other value
  falls back to 9600.

Each tone is written as `channel,frequency,delay,velocity ` and is also
printed in square brackets as it is sent. The stream ends with `END `.

The command exits with status 1 in three cases:

- the file cannot be opened;
- the file is empty or is not a MIDI file it understands;
- the serial port cannot be opened.

## Library use

```python
from miditones.midi import format_tones, parse_midi, read_midi_file
from miditones.transmit import send_tone_data

track = parse_midi(read_midi_file("song.mid"))
lines = format_tones(track)
sent = send_tone_data(lines, "/dev/ttyACM0", 115200, 100)
```

`read_midi_file(path)` returns the file's bytes. It raises `OSError` if the
file cannot be opened, and `MidiFormatError` if the file is empty.
`parse_midi(data)` takes those bytes and returns one merged `Track`, with its
`events` and `tones` filled in. `format_tones(track)` renders the tones as
strings. `send_tone_data(data, port, baud, limit)` writes them to a serial
port and returns how many entries it wrote.

The lower-level helpers in `miditones.midi` are:

- `read_midi_header(data)`: returns `(track count, ticks per quarter note)`.
- `read_chunk_header(data, offset)`: returns the chunk length.
- `read_midi_events(data, offset, length, track)`
- `merge_tracks(tracks, ticks_per_quarter)`
- `compute_tones_from_events(track)`
- `frequency_from_midi(note)`
- `time_from_midi(delta_time, mpq, tpq)`
- `number_from_bytes(values)`

Malformed input raises `miditones.midi.MidiFormatError`, which is a
subclass of `ValueError`.

`miditones.models` holds the data classes `Event`, `Tone`, `Track` and
`Note`. `str()` of a `Note` gives `[channel,frequency,delay,velocity]`, with
the frequency shown to two decimal places.

Formats 0, 1 and 2 are accepted. Tracks are merged into one stream ordered by
time, and set-tempo meta events change the timing of the tones that follow.

## What it does not do

Only note-on, note-off and tempo events are used. Other channel messages,
and system-exclusive events, are skipped. The package sends tones over a
serial port, but it does not play them itself. Nothing here runs on the
receiving device.