"""Summary statistics of a FASTA file gathered from its headers."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

from protfasta.core.header import ProteinDatabase, parse_header
from protfasta.core.parameters import FastaParameters

logger = logging.getLogger(__name__)


@dataclass
class FastaSummary:
    """Content summary of a FASTA file."""

    name: str
    path: Path
    n_sequences: int
    n_target: int
    species_occurrence: dict[str, int] = field(default_factory=dict)
    database_types: dict[ProteinDatabase, int] = field(default_factory=dict)
    last_modified: datetime | None = None

    @property
    def n_decoy(self) -> int:
        """Number of decoy sequences."""
        return self.n_sequences - self.n_target

    def type_as_string(self) -> str:
        """Database types found in the file, with their share if mixed."""
        if not self.database_types:
            return ProteinDatabase.UNKNOWN.value
        if len(self.database_types) == 1:
            return next(iter(self.database_types)).value

        total = sum(self.database_types.values())
        return ", ".join(
            f"{database.value} ({100 * count / total:.1f}%)"
            for database, count in self.database_types.items()
        )

    def __str__(self) -> str:
        lines = [
            f"FASTA Summary: {self.name}",
            f"  File:       {self.path}",
            f"  Sequences:  {self.n_sequences} ({self.n_target} target, {self.n_decoy} decoy)",
            f"  Database:   {self.type_as_string()}",
        ]
        if self.species_occurrence:
            lines.append("  Species:")
            for species, count in sorted(
                self.species_occurrence.items(), key=lambda item: (-item[1], item[0])
            ):
                lines.append(f"    {species}: {count}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert the summary to a dictionary."""
        return {
            "name": self.name,
            "path": str(self.path),
            "n_sequences": self.n_sequences,
            "n_target": self.n_target,
            "n_decoy": self.n_decoy,
            "species_occurrence": dict(self.species_occurrence),
            "database_types": {db.value: count for db, count in self.database_types.items()},
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
        }


def summarize_fasta(
    path: str | Path,
    parameters: FastaParameters | None = None,
    should_stop: Callable[[], bool] | None = None,
    on_progress: Callable[[float], None] | None = None,
) -> FastaSummary | None:
    """Gather summary data on the content of a FASTA file.

    Only the headers are read, so the scan stays cheap on large databases.

    Args:
        path: Path to FASTA file
        parameters: Reading and decoy options
        should_stop: Queried once per line; the scan is abandoned when it
                     returns True
        on_progress: Receives the percentage of the file read

    Returns:
        FastaSummary, or None if the scan was cancelled
    """
    path = Path(path)
    parameters = parameters or FastaParameters()

    species: Counter[str] = Counter()
    databases: Counter[ProteinDatabase] = Counter()
    n_sequences = 0
    n_target = 0

    with parameters.open_headers(path, should_stop=should_stop, on_progress=on_progress) as headers:
        for line in headers:
            header = parse_header(line)
            species[header.taxonomy or "Unknown"] += 1
            databases[header.database_type] += 1
            if not parameters.is_decoy(header.accession_or_rest):
                n_target += 1
            n_sequences += 1

        if headers.cancelled:
            return None

    logger.debug("Summarized %d sequences in %s", n_sequences, path)
    return FastaSummary(
        name=path.stem,
        path=path.resolve(),
        n_sequences=n_sequences,
        n_target=n_target,
        species_occurrence=dict(species),
        database_types=dict(databases),
        last_modified=datetime.fromtimestamp(path.stat().st_mtime),
    )
