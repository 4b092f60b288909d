"""Line-at-a-time access to a text file with byte-based progress."""

from __future__ import annotations

import codecs
import io
import logging
from pathlib import Path

from protfasta.core.errors import IoFailure
from protfasta.io.counting import CountingStream

logger = logging.getLogger(__name__)


class LineCursor:
    """Decoded, trimmed line stream over a file.

    The cursor owns the file handle and the read position. Blank lines are
    returned as empty strings; filtering them is left to the caller.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        """Open a file for line reading.

        Args:
            path: Path to the file
            encoding: Text encoding of the file

        Raises:
            LookupError: If the encoding is unknown or not a text encoding
            IoFailure: If the file cannot be opened
        """
        self.path = Path(path)
        self.encoding = encoding
        # A leading byte-order mark is not part of the first line
        if codecs.lookup(encoding).name == "utf-8":
            encoding = "utf-8-sig"
        self.end_of_file = False

        try:
            self.file_length = self.path.stat().st_size
            raw = open(self.path, "rb", buffering=0)
        except OSError as e:
            raise IoFailure(f"Cannot open {self.path}: {e}", str(self.path)) from e

        self._counter = CountingStream(raw)
        try:
            self._stream: io.TextIOWrapper | None = io.TextIOWrapper(
                io.BufferedReader(self._counter), encoding=encoding
            )
        except LookupError:
            # Known codec, but not a text encoding (rot13, hex, ...)
            self._counter.close()
            raise
        logger.debug("Opened %s (%d bytes, %s)", self.path, self.file_length, encoding)

    @property
    def bytes_read(self) -> int:
        """Number of bytes consumed from the file so far."""
        return self._counter.bytes_read

    @property
    def closed(self) -> bool:
        return self._stream is None

    def next_line(self) -> str | None:
        """Read the next line.

        Returns:
            The line with surrounding whitespace removed, or None at the end
            of the file or once the cursor is closed

        Raises:
            IoFailure: If reading or decoding fails
        """
        if self.end_of_file or self._stream is None:
            return None

        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailure(
                f"Error reading {self.path} after {self.bytes_read} bytes: {e}", str(self.path)
            ) from e

        if not line:
            self.end_of_file = True
            logger.debug("Reached end of %s", self.path)
            return None
        return line.strip()

    def progress_percent(self) -> float:
        """Percentage of the file consumed, between 0 and 100.

        An empty file counts as fully read from the moment it is opened.
        """
        if self.end_of_file or self.file_length == 0:
            return 100.0
        return min(100.0, 100.0 * self.bytes_read / self.file_length)

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
            logger.debug("Closed %s", self.path)

    def __enter__(self) -> LineCursor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
