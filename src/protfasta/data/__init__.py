"""Static amino acid data."""

from protfasta.data.amino_acids import AMINO_ACIDS, FORBIDDEN_MARKER

__all__ = ["AMINO_ACIDS", "FORBIDDEN_MARKER"]
