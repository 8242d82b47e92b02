"""Reading Standard MIDI Files into tracks of events and tones."""

from __future__ import annotations

import heapq
import struct
from dataclasses import replace
from os import PathLike
from typing import Iterable, Sequence

from miditones.models import Event, Tone, Track

HEADER_MAGIC = b"MThd\x00\x00\x00\x06"
CHUNK_MAGIC = b"MTrk"
HEADER_SIZE = 14
A4_FREQUENCY = 443
DEFAULT_MPQN = 500000


class MidiFormatError(ValueError):
    """Raised when data is not a MIDI file this reader understands."""


def number_from_bytes(values: Iterable[int]) -> int:
    """Interpret a sequence of bytes as a big-endian unsigned number."""
    result = 0
    for value in values:
        result = result * 256 + (value & 0xFF)
    return result


def time_from_midi(delta_time: float, mpq: float, tpq: float) -> int:
    """Convert a tick count to milliseconds for the given tempo and resolution."""
    return int(delta_time * mpq / (1000 * tpq))


def frequency_from_midi(note: int) -> float:
    """Return the frequency in Hz of a MIDI note number, at single precision."""
    value = A4_FREQUENCY * 2 ** ((note - 69) / 12.0)
    return struct.unpack("f", struct.pack("f", value))[0]


def read_midi_header(data: Sequence[int]) -> tuple[int, int]:
    """Check the file header and return (track count, ticks per quarter note)."""
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise MidiFormatError("Midi header too small")
    if data[: len(HEADER_MAGIC)] != HEADER_MAGIC:
        raise MidiFormatError("Midi header doesn't match")
    ticks_per_quarter = number_from_bytes(data[12:14])
    if data[8] != 0x00 or data[9] not in (0x00, 0x01, 0x02):
        raise MidiFormatError("Midi header doesn't match")
    if data[9] == 0x00:
        return 1, ticks_per_quarter
    return number_from_bytes(data[10:12]), ticks_per_quarter


def read_chunk_header(data: Sequence[int], offset: int) -> int:
    """Check a track chunk header at offset and return the chunk length."""
    data = bytes(data)
    if offset < 0 or offset + 8 > len(data):
        raise MidiFormatError("Chunk header runs past the end of the data")
    if data[offset : offset + 4] != CHUNK_MAGIC:
        raise MidiFormatError("Chunk header doesn't match")
    return number_from_bytes(data[offset + 4 : offset + 8])


def read_midi_events(data: Sequence[int], offset: int, length: int, track: Track) -> None:
    """Read the events of one track chunk body into track."""
    data = bytes(data)
    if offset + length > len(data):
        raise MidiFormatError("Track chunk runs past the end of the data")

    pos = offset
    running_status = 0
    try:
        while length > 0:
            delta_time = 0
            while data[pos] & 0x80:
                delta_time = (delta_time + (data[pos] & 0x7F)) * 128
                pos += 1
                length -= 1
            delta_time += data[pos]
            pos += 1
            length -= 1

            status = data[pos]
            if status == 0xFF:
                running_status = 0
                meta_type = data[pos + 1]
                meta_length = data[pos + 2]
                payload = list(data[pos + 3 : pos + 3 + meta_length])
                if len(payload) < meta_length:
                    raise MidiFormatError("Meta event runs past the end of the data")
                track.add_event(Event(delta_time, meta_type, meta_length, payload))
                if meta_type == 0x2F:
                    break
                pos += 3 + meta_length
                length -= 3 + meta_length
            elif status == 0xF0:
                running_status = 0
                while data[pos - 1] != 0xF7:
                    pos += 1
                    length -= 1
            else:
                if running_status < 0x80 and status < 0x80:
                    raise MidiFormatError("Midi event is invalid")
                skip = 0
                if status >= 0x80:
                    running_status = status
                    skip = 1
                payload = list(data[pos + skip : pos + skip + 2])
                if len(payload) < 2:
                    raise MidiFormatError("Midi event runs past the end of the data")
                if 0x80 <= running_status < 0xA0:
                    track.add_event(
                        Event(delta_time, running_status, 0, payload, channel=track.number)
                    )
                pos += 2 + skip
                length -= 2 + skip
    except IndexError as exc:
        raise MidiFormatError("Midi event runs past the end of the data") from exc


def merge_tracks(tracks: Sequence[Track], ticks_per_quarter: int) -> Track:
    """Merge tracks into one, ordered by absolute time; ties go to the earlier track."""
    merged = Track(ticks_per_quarter=ticks_per_quarter)
    heap = [
        (track.events[0].delta_time, index, 0)
        for index, track in enumerate(tracks)
        if track.events
    ]
    heapq.heapify(heap)

    previous = 0
    while heap:
        time, index, position = heapq.heappop(heap)
        events = tracks[index].events
        merged.add_event(replace(events[position], delta_time=time - previous))
        previous = time
        following = position + 1
        if following < len(events):
            heapq.heappush(heap, (time + events[following].delta_time, index, following))
    return merged


def compute_tones_from_events(track: Track) -> None:
    """Turn the note events of track into tones, following tempo changes."""
    mpqn = DEFAULT_MPQN
    for event in list(track.events):
        kind = event.type_byte & 0xF0
        if kind in (0x80, 0x90):
            velocity = event.data_bytes[1] if kind == 0x90 else 0
            track.add_tone(
                Tone(
                    frequency_from_midi(event.data_bytes[0]),
                    time_from_midi(event.delta_time, mpqn, track.ticks_per_quarter),
                    velocity,
                    channel=event.channel,
                )
            )
        if event.type_byte == 0x51 and event.length & 1:
            mpqn = number_from_bytes(event.data_bytes)


def format_tones(track: Track) -> list[str]:
    """Render each tone as "channel,frequency,delay,velocity " for transmission."""
    return [
        f"{tone.channel},{tone.frequency:g},{tone.delta_time},{tone.velocity} "
        for tone in track.tones
    ]


def parse_midi(data: Sequence[int]) -> Track:
    """Parse a whole MIDI file into a single merged track with its tones."""
    data = bytes(data)
    track_count, ticks_per_quarter = read_midi_header(data)
    tracks = []
    offset = HEADER_SIZE
    for number in range(track_count):
        track = Track(number=number, ticks_per_quarter=ticks_per_quarter)
        chunk_length = read_chunk_header(data, offset)
        offset += 8
        read_midi_events(data, offset, chunk_length, track)
        offset += chunk_length
        tracks.append(track)

    merged = merge_tracks(tracks, ticks_per_quarter)
    compute_tones_from_events(merged)
    return merged


def read_midi_file(path: str | PathLike[str]) -> bytes:
    """Read a file's bytes; an empty file is not a MIDI file."""
    with open(path, "rb") as handle:
        content = handle.read()
    if not content:
        raise MidiFormatError(f"Unable to read file {path}")
    return content