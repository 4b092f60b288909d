"""Parallel scan of the proteins of a FASTA file.

Worker threads share a single FastaIterator and pull records from it until
it is exhausted, the way a pool of digestion or search workers consumes a
protein database.
"""

from __future__ import annotations

import logging
import os
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import numpy as np

from protfasta.core.errors import MalformedRecord, UnrecognizedResidue
from protfasta.core.parameters import FastaParameters
from protfasta.core.protein import Protein
from protfasta.io.fasta import FastaIterator

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Statistics over all proteins of a FASTA file."""

    lengths: np.ndarray
    composition: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    workers: int = 1

    @property
    def n_records(self) -> int:
        return len(self.lengths)

    @property
    def total_residues(self) -> int:
        return int(self.lengths.sum())

    @property
    def min_length(self) -> int | None:
        return int(self.lengths.min()) if self.n_records else None

    @property
    def max_length(self) -> int | None:
        return int(self.lengths.max()) if self.n_records else None

    @property
    def mean_length(self) -> float | None:
        return float(np.mean(self.lengths)) if self.n_records else None

    @property
    def median_length(self) -> float | None:
        return float(np.median(self.lengths)) if self.n_records else None

    def __str__(self) -> str:
        if not self.n_records:
            lines = ["Scan Results:", "  Proteins: 0"]
        else:
            lines = [
                "Scan Results:",
                f"  Proteins:  {self.n_records}",
                f"  Residues:  {self.total_residues}",
                f"  Length:    min={self.min_length}, max={self.max_length}, "
                f"mean={self.mean_length:.1f}, median={self.median_length:.1f}",
            ]
        if self.errors:
            lines.append(f"  Skipped:   {len(self.errors)} record(s)")
            lines.extend(f"    {error}" for error in self.errors)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert results to a dictionary."""
        return {
            "n_records": self.n_records,
            "total_residues": self.total_residues,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "mean_length": self.mean_length,
            "median_length": self.median_length,
            "composition": dict(sorted(self.composition.items())),
            "errors": list(self.errors),
            "workers": self.workers,
        }


@dataclass
class _Partial:
    lengths: list[int] = field(default_factory=list)
    composition: Counter[str] = field(default_factory=Counter)
    errors: list[str] = field(default_factory=list)


def get_worker_count(requested: int) -> int:
    """Determine the number of worker threads."""
    cpu_count = os.cpu_count() or 4
    if requested > 0:
        return min(requested, cpu_count)
    return cpu_count


def _drain(
    records: FastaIterator,
    keep_going: bool,
    on_record: Callable[[Protein], None] | None,
) -> _Partial:
    """Pull proteins from a shared iterator until it is exhausted."""
    partial = _Partial()
    while True:
        try:
            protein = records.next_record()
        except (MalformedRecord, UnrecognizedResidue) as e:
            if not keep_going:
                # Stop the other workers as well
                records.close()
                raise
            logger.warning("Skipping record: %s", e)
            partial.errors.append(str(e))
            continue
        except Exception:
            records.close()
            raise

        if protein is None:
            return partial
        partial.lengths.append(len(protein))
        partial.composition.update(protein.sequence)
        if on_record is not None:
            on_record(protein)


def scan_records(
    path: str | Path,
    parameters: FastaParameters | None = None,
    workers: int = 1,
    keep_going: bool = False,
    on_record: Callable[[Protein], None] | None = None,
) -> ScanResult:
    """Read every protein of a FASTA file with one or more threads.

    Args:
        path: Path to FASTA file
        parameters: Reading options (encoding, sanitization)
        workers: Number of threads sharing the iterator
        keep_going: Record malformed or invalid proteins as errors and
                    continue, instead of stopping at the first one
        on_record: Called with every protein read, from the worker thread

    Returns:
        ScanResult with length statistics and residue composition

    Raises:
        MalformedRecord: On a header without sequence, unless keep_going
        UnrecognizedResidue: On an invalid residue, unless keep_going
        IoFailure: If the file cannot be read
    """
    parameters = parameters or FastaParameters()
    workers = max(1, workers)

    with parameters.open_records(path) as records:
        if workers == 1:
            partials = [_drain(records, keep_going, on_record)]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [
                    executor.submit(_drain, records, keep_going, on_record)
                    for _ in range(workers)
                ]
                partials = [future.result() for future in futures]

    lengths: list[int] = []
    composition: Counter[str] = Counter()
    errors: list[str] = []
    for partial in partials:
        lengths.extend(partial.lengths)
        composition.update(partial.composition)
        errors.extend(partial.errors)

    logger.debug("Scanned %d proteins from %s with %d worker(s)", len(lengths), path, workers)
    return ScanResult(
        lengths=np.asarray(lengths, dtype=np.int64),
        composition=dict(composition),
        errors=errors,
        workers=workers,
    )
