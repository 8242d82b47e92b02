"""Data records for MIDI events, tones and tracks."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Event:
    """A MIDI channel or meta event as read from a track chunk."""

    delta_time: int
    type_byte: int
    length: int = 0
    data_bytes: list[int] = field(default_factory=list)
    channel: int = 0


@dataclass
class Tone:
    """A tone to be played: frequency in Hz, delay in milliseconds."""

    frequency: float
    delta_time: int
    velocity: int
    channel: int = 0


@dataclass
class Track:
    """A sequence of events and the tones computed from them."""

    number: int = 0
    ticks_per_quarter: int = 0
    tones: list[Tone] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)

    def add_tone(self, tone: Tone) -> None:
        """Append a tone to the track."""
        self.tones.append(tone)

    def add_event(self, event: Event) -> None:
        """Append an event to the track."""
        self.events.append(event)


@dataclass
class Note:
    """A tone as held by the receiving side; channel and velocity are bytes."""

    frequency: float
    delta_time: int
    velocity: int
    channel: int = 0

    def __post_init__(self) -> None:
        self.channel &= 0xFF
        self.velocity &= 0xFF

    def __str__(self) -> str:
        return f"[{self.channel},{self.frequency:.2f},{self.delta_time},{self.velocity}]"