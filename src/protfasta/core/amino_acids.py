"""Amino acid alphabet used to validate protein sequences."""

from __future__ import annotations

import logging

from protfasta.core.errors import UnrecognizedResidue
from protfasta.data.amino_acids import AMINO_ACIDS, COMBINATIONS, FORBIDDEN_MARKER

logger = logging.getLogger(__name__)


class AminoAcidAlphabet:
    """Lookup of single-letter residue codes."""

    def __init__(self, residues: dict[str, str] | None = None):
        """Initialize with a residue-to-name mapping.

        Args:
            residues: Dict mapping upper-case one-letter codes to residue
                      names. Uses the standard, rare and ambiguity codes if
                      not provided.
        """
        self.residues = residues if residues is not None else AMINO_ACIDS

    def lookup(self, residue: str) -> str | None:
        """Get the name of a residue.

        Args:
            residue: Single character, any case

        Returns:
            Residue name, or None if the character is not a known amino acid
        """
        return self.residues.get(residue.upper())

    def is_combination(self, residue: str) -> bool:
        """Check whether a code stands for several amino acids (B, J, Z, X)."""
        return residue.upper() in COMBINATIONS

    def sanitize(self, sequence: str, accession: str | None = None) -> str:
        """Strip masked residues and normalize case.

        Every occurrence of the forbidden marker is dropped, every other
        character is upper-cased and must be a known residue.

        Args:
            sequence: Raw sequence as read from the file
            accession: Accession of the protein, used in error messages

        Returns:
            Upper-case sequence without forbidden markers

        Raises:
            UnrecognizedResidue: If a character is not in the alphabet
        """
        residues = []
        for char in sequence:
            if char == FORBIDDEN_MARKER:
                continue
            residue = char.upper()
            if residue not in self.residues:
                raise UnrecognizedResidue(char, accession)
            residues.append(residue)

        dropped = len(sequence) - len(residues)
        if dropped:
            logger.debug("Dropped %d masked residue(s) from %s", dropped, accession)
        return "".join(residues)


# Default alphabet instance
DEFAULT_ALPHABET = AminoAcidAlphabet()
