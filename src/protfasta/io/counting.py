"""Byte-counting input stream.

Progress through a FASTA file is measured in bytes taken from the disk, not
in decoded characters, so it stays accurate for multi-byte encodings. The
counter sits below the buffered text decoder.
"""

from __future__ import annotations

import io


class CountingStream(io.RawIOBase):
    """Raw stream wrapper that counts the bytes read from the underlying file."""

    def __init__(self, raw: io.RawIOBase):
        super().__init__()
        self._raw = raw
        self.bytes_read = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int | None:  # type: ignore[no-untyped-def]
        count = self._raw.readinto(buffer)
        if count:
            self.bytes_read += count
        return count

    def close(self) -> None:
        if not self.closed:
            self._raw.close()
        super().close()
