"""Parameters controlling how a FASTA file is read."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from protfasta.io.fasta import FastaIterator, HeaderIterator


@dataclass
class FastaParameters:
    """Reading options for a FASTA file."""

    encoding: str = "utf-8"
    sanitize: bool = False
    decoy_tag: str = "_REVERSED"
    decoy_tag_is_suffix: bool = True

    def is_decoy(self, accession: str) -> bool:
        """Check whether an accession carries the decoy tag.

        Args:
            accession: Protein accession

        Returns:
            True if the accession is tagged as decoy
        """
        if not self.decoy_tag:
            return False
        if self.decoy_tag_is_suffix:
            return accession.endswith(self.decoy_tag)
        return accession.startswith(self.decoy_tag)

    def open_records(self, path: str | Path) -> FastaIterator:
        """Open a record iterator on a FASTA file with these parameters."""
        from protfasta.io.fasta import FastaIterator

        return FastaIterator(path, sanitize=self.sanitize, encoding=self.encoding)

    def open_headers(
        self,
        path: str | Path,
        should_stop: Callable[[], bool] | None = None,
        on_progress: Callable[[float], None] | None = None,
    ) -> HeaderIterator:
        """Open a header-only iterator on a FASTA file with these parameters."""
        from protfasta.io.fasta import HeaderIterator

        return HeaderIterator(
            path,
            encoding=self.encoding,
            should_stop=should_stop,
            on_progress=on_progress,
        )
