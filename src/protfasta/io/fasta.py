"""Streaming FASTA readers.

Both readers pull one line at a time from a :class:`LineCursor`, so memory
use does not depend on the size of the file. A single instance may be shared
by several threads: every call runs the whole read-and-assemble step under
one lock, so each record is handed out exactly once.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Iterator

from protfasta.core.amino_acids import DEFAULT_ALPHABET, AminoAcidAlphabet
from protfasta.core.errors import MalformedRecord
from protfasta.core.header import Header, parse_header
from protfasta.core.protein import Protein
from protfasta.io.cursor import LineCursor

logger = logging.getLogger(__name__)


class _CursorReader:
    """Shared state of the FASTA readers: cursor, lock and end-of-file flag."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self._cursor = LineCursor(self.path, encoding=encoding)
        self._lock = threading.Lock()
        self.end_of_file = False

    def progress_percent(self) -> float:
        """Percentage of the file consumed so far (0-100)."""
        return self._cursor.progress_percent()

    def _mark_end_of_file(self) -> None:
        self.end_of_file = True
        self._cursor.close()

    def close(self) -> None:
        """Release the file. Later reads behave as end of file."""
        with self._lock:
            self.end_of_file = True
            self._cursor.close()

    def __enter__(self):  # type: ignore[no-untyped-def]
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class FastaIterator(_CursorReader):
    """Iterates the proteins of a FASTA file.

    A record is only known to be complete once the next header (or the end of
    the file) has been read, so the iterator always holds the header of the
    following record as lookahead between calls.

    Example:
        with FastaIterator("uniprot.fasta", sanitize=True) as proteins:
            for protein in proteins:
                print(protein.accession, len(protein))
    """

    def __init__(
        self,
        path: str | Path,
        sanitize: bool = False,
        encoding: str = "utf-8",
        alphabet: AminoAcidAlphabet | None = None,
    ):
        """Open a FASTA file.

        Args:
            path: Path to FASTA file
            sanitize: Drop '*' markers, upper-case residues and reject
                      characters that are not amino acids
            encoding: Text encoding of the file
            alphabet: Residue alphabet used when sanitizing

        Raises:
            IoFailure: If the file cannot be opened
        """
        super().__init__(path, encoding=encoding)
        self._sanitize = sanitize
        self.alphabet = alphabet if alphabet is not None else DEFAULT_ALPHABET
        self._pending_header: Header | None = None

    @property
    def sanitize(self) -> bool:
        return self._sanitize

    def next_record(self) -> Protein | None:
        """Read the next protein.

        Returns:
            The next Protein, or None once the file is exhausted

        Raises:
            MalformedRecord: If a header has no sequence. The following
                record can still be read with another call.
            UnrecognizedResidue: If sanitizing and the sequence contains a
                character that is not an amino acid
            IoFailure: If reading the file fails
        """
        with self._lock:
            return self._read_record()

    def _read_record(self) -> Protein | None:
        if self.end_of_file:
            return None

        header = self._pending_header
        next_header = None
        chunks: list[str] = []

        while True:
            line = self._cursor.next_line()
            if line is None:
                self._mark_end_of_file()
                break
            if line.startswith(">"):
                parsed = parse_header(line)
                if header is None:
                    header = parsed
                    continue
                next_header = parsed
                break
            if not line:
                continue
            if header is None:
                logger.warning("Ignoring sequence line before the first header in %s", self.path)
                continue
            chunks.append(line)

        self._pending_header = next_header

        if header is None:
            logger.debug("No more proteins in %s", self.path)
            return None

        accession = header.accession_or_rest
        sequence = "".join(chunks)
        if self._sanitize:
            sequence = self.alphabet.sanitize(sequence, accession)
        if not sequence:
            raise MalformedRecord(accession)
        return Protein(accession, sequence, header)

    def __iter__(self) -> Iterator[Protein]:
        return self

    def __next__(self) -> Protein:
        protein = self.next_record()
        if protein is None:
            raise StopIteration
        return protein


class HeaderIterator(_CursorReader):
    """Iterates the header lines of a FASTA file without keeping sequences.

    The optional ``should_stop`` query is checked once per line read and
    ends the scan early when it returns True. ``on_progress`` receives the
    percentage of the file read after every line. Both run while the reader
    lock is held and must not call back into the iterator.
    """

    def __init__(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        should_stop: Callable[[], bool] | None = None,
        on_progress: Callable[[float], None] | None = None,
    ):
        super().__init__(path, encoding=encoding)
        self._should_stop = should_stop
        self._on_progress = on_progress
        self.cancelled = False

    def next_header_line(self) -> str | None:
        """Read the next header line.

        Returns:
            The trimmed header line including '>', or None at the end of the
            file or after cancellation
        """
        with self._lock:
            if self.end_of_file or self.cancelled:
                return None

            while True:
                if self._should_stop is not None and self._should_stop():
                    logger.info("Header scan of %s cancelled", self.path)
                    self.cancelled = True
                    self._cursor.close()
                    return None

                line = self._cursor.next_line()
                if line is None:
                    self._mark_end_of_file()
                    self._report_progress()
                    return None

                self._report_progress()
                if line.startswith(">"):
                    return line

    def next_header(self) -> Header | None:
        """Read and parse the next header."""
        line = self.next_header_line()
        if line is None:
            return None
        return parse_header(line)

    def _report_progress(self) -> None:
        if self._on_progress is not None:
            self._on_progress(self._cursor.progress_percent())

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.next_header_line()
        if line is None:
            raise StopIteration
        return line


def read_fasta(
    path: str | Path,
    sanitize: bool = False,
    encoding: str = "utf-8",
) -> Iterator[Protein]:
    """Parse a FASTA file and yield its proteins.

    Args:
        path: Path to FASTA file
        sanitize: Clean and validate the sequences
        encoding: Text encoding of the file

    Yields:
        Protein records in file order
    """
    with FastaIterator(path, sanitize=sanitize, encoding=encoding) as proteins:
        yield from proteins


def read_headers(path: str | Path, encoding: str = "utf-8") -> Iterator[Header]:
    """Parse the headers of a FASTA file, skipping the sequences.

    Args:
        path: Path to FASTA file
        encoding: Text encoding of the file

    Yields:
        Parsed headers in file order
    """
    with HeaderIterator(path, encoding=encoding) as headers:
        for line in headers:
            yield parse_header(line)
