"""protfasta: streaming reader for protein FASTA databases."""

__version__ = "0.1.0"

from protfasta.core.errors import FastaError, IoFailure, MalformedRecord, UnrecognizedResidue
from protfasta.core.header import Header, parse_header
from protfasta.core.parameters import FastaParameters
from protfasta.core.protein import Protein
from protfasta.io.fasta import FastaIterator, HeaderIterator, read_fasta, read_headers
from protfasta.analysis.summary import FastaSummary, summarize_fasta
from protfasta.analysis.scan import ScanResult, scan_records

__all__ = [
    "FastaError",
    "IoFailure",
    "MalformedRecord",
    "UnrecognizedResidue",
    "Header",
    "parse_header",
    "FastaParameters",
    "Protein",
    "FastaIterator",
    "HeaderIterator",
    "read_fasta",
    "read_headers",
    "FastaSummary",
    "summarize_fasta",
    "ScanResult",
    "scan_records",
]
