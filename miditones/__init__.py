"""Read MIDI files into timed tones and send them over a serial port."""

__version__ = "0.1.0"
__all__ = ["cli", "midi", "models", "transmit"]