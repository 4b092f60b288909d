"""Amino acid one-letter codes."""

from __future__ import annotations

# The 20 standard amino acids
STANDARD_AMINO_ACIDS: dict[str, str] = {
    "A": "Alanine", "C": "Cysteine", "D": "Aspartic Acid", "E": "Glutamic Acid",
    "F": "Phenylalanine", "G": "Glycine", "H": "Histidine", "I": "Isoleucine",
    "K": "Lysine", "L": "Leucine", "M": "Methionine", "N": "Asparagine",
    "P": "Proline", "Q": "Glutamine", "R": "Arginine", "S": "Serine",
    "T": "Threonine", "V": "Valine", "W": "Tryptophan", "Y": "Tyrosine",
}

# Rare proteinogenic amino acids
RARE_AMINO_ACIDS: dict[str, str] = {
    "U": "Selenocysteine",
    "O": "Pyrrolysine",
}

# Ambiguity codes and the residues each one stands for
COMBINATIONS: dict[str, str] = {
    "B": "DN",
    "J": "IL",
    "Z": "EQ",
    "X": "ACDEFGHIKLMNPQRSTVWYUO",
}

COMBINATION_NAMES: dict[str, str] = {
    "B": "Asparagine or Aspartic Acid",
    "J": "Leucine or Isoleucine",
    "Z": "Glutamine or Glutamic Acid",
    "X": "Unknown Amino Acid",
}

AMINO_ACIDS: dict[str, str] = {
    **STANDARD_AMINO_ACIDS,
    **RARE_AMINO_ACIDS,
    **COMBINATION_NAMES,
}

# Marks masked or ambiguous residues that must not reach downstream scoring
FORBIDDEN_MARKER = "*"
