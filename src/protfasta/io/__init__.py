"""Input/output utilities."""

from protfasta.io.cursor import LineCursor
from protfasta.io.fasta import FastaIterator, HeaderIterator, read_fasta, read_headers
from protfasta.io.output import OutputFormat, format_headers, format_result

__all__ = [
    "LineCursor",
    "FastaIterator",
    "HeaderIterator",
    "read_fasta",
    "read_headers",
    "OutputFormat",
    "format_headers",
    "format_result",
]
