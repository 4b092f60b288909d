"""FASTA content analysis."""

from protfasta.analysis.scan import ScanResult, scan_records
from protfasta.analysis.summary import FastaSummary, summarize_fasta

__all__ = ["ScanResult", "scan_records", "FastaSummary", "summarize_fasta"]
