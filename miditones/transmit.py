"""Sending tone data over a serial port."""

from __future__ import annotations

import time
from typing import Sequence

import serial

DEFAULT_BAUD = 115200
FALLBACK_BAUD = 9600
DEFAULT_LIMIT = 0xFFFF
END_MARKER = b"END "
PAUSE_SECONDS = 60e-6


def send_tone_data(
    data: Sequence[str],
    port: str,
    baud: int = DEFAULT_BAUD,
    limit: int = DEFAULT_LIMIT,
) -> int:
    """Write up to limit entries to the serial port, then the end marker.

    Returns the number of entries written. Any baud rate other than
    115200 falls back to 9600.
    """
    rate = DEFAULT_BAUD if baud == DEFAULT_BAUD else FALLBACK_BAUD
    connection = serial.Serial(port, baudrate=rate)
    print("Starting Serial Transmit")
    sent = 0
    try:
        for entry in data[: max(limit, 0)]:
            print(f"[{entry}]")
            connection.write(entry.encode("ascii"))
            sent += 1
            time.sleep(PAUSE_SECONDS)
        connection.write(END_MARKER)
    finally:
        connection.close()
    return sent