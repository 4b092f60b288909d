"""Errors raised while reading FASTA files.

Infrastructure failures (``IoFailure``) are kept apart from problems with the
content of the file (``MalformedRecord``, ``UnrecognizedResidue``), so callers
can decide to skip a bad record without masking a broken disk or a missing
file.
"""

from __future__ import annotations


class FastaError(Exception):
    """Base class for all errors raised by protfasta."""


class IoFailure(FastaError, OSError):
    """The file could not be opened, read or decoded."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class MalformedRecord(FastaError, ValueError):
    """A header was followed by no sequence before the next header or EOF."""

    def __init__(self, accession: str):
        super().__init__(f"No sequence found for header '{accession}'")
        self.accession = accession


class UnrecognizedResidue(FastaError, ValueError):
    """A sequence contained a character that is not a known amino acid."""

    def __init__(self, residue: str, accession: str | None = None):
        if accession is None:
            message = f"Unrecognized amino acid '{residue}'"
        else:
            message = f"Unrecognized amino acid '{residue}' in protein '{accession}'"
        super().__init__(message)
        self.residue = residue
        self.accession = accession
