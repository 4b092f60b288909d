"""Core data structures: headers, proteins and the amino acid alphabet."""

from protfasta.core.amino_acids import DEFAULT_ALPHABET, AminoAcidAlphabet
from protfasta.core.errors import FastaError, IoFailure, MalformedRecord, UnrecognizedResidue
from protfasta.core.header import Header, ProteinDatabase, parse_header
from protfasta.core.parameters import FastaParameters
from protfasta.core.protein import Protein

__all__ = [
    "AminoAcidAlphabet",
    "DEFAULT_ALPHABET",
    "FastaError",
    "IoFailure",
    "MalformedRecord",
    "UnrecognizedResidue",
    "Header",
    "ProteinDatabase",
    "parse_header",
    "FastaParameters",
    "Protein",
]
