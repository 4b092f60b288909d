"""Protein records produced by the FASTA iterators."""

from __future__ import annotations

from dataclasses import dataclass, field

from protfasta.core.header import Header


@dataclass(frozen=True)
class Protein:
    """A protein sequence and the accession of the header it came from."""

    accession: str
    sequence: str
    header: Header | None = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def description(self) -> str | None:
        """Free-text description of the protein, if the header had one."""
        if self.header is None:
            return None
        return self.header.description
