"""Output formatters for FASTA summaries, scans and header listings."""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from protfasta.analysis.scan import ScanResult
    from protfasta.analysis.summary import FastaSummary
    from protfasta.core.header import Header


class OutputFormat(Enum):
    """Supported output formats."""

    PRETTY = "pretty"
    TSV = "tsv"
    JSON = "json"


def _na(value: object, spec: str = "") -> str:
    return "NA" if value is None else format(value, spec)


def format_result(
    result: FastaSummary | ScanResult,
    format: OutputFormat = OutputFormat.PRETTY,
) -> str:
    """Format a summary or scan result for output.

    Args:
        result: FastaSummary or ScanResult
        format: Output format

    Returns:
        Formatted string representation
    """
    if format == OutputFormat.PRETTY:
        return str(result)

    elif format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2)

    elif format == OutputFormat.TSV:
        return _format_tsv(result)

    else:
        raise ValueError(f"Unknown format: {format}")


def _format_tsv(result: FastaSummary | ScanResult) -> str:
    """Format results as tab-separated values."""
    from protfasta.analysis.scan import ScanResult
    from protfasta.analysis.summary import FastaSummary

    if isinstance(result, FastaSummary):
        header = "name\tn_sequences\tn_target\tn_decoy\tdatabase"
        values = (
            f"{result.name}\t{result.n_sequences}\t{result.n_target}\t"
            f"{result.n_decoy}\t{result.type_as_string()}"
        )
        return f"{header}\n{values}"

    elif isinstance(result, ScanResult):
        header = "n_records\ttotal_residues\tmin_length\tmax_length\tmean_length\tmedian_length\tn_errors"
        values = (
            f"{result.n_records}\t{result.total_residues}\t{_na(result.min_length)}\t"
            f"{_na(result.max_length)}\t{_na(result.mean_length, '.2f')}\t"
            f"{_na(result.median_length, '.1f')}\t{len(result.errors)}"
        )
        return f"{header}\n{values}"

    else:
        raise TypeError(f"Unknown result type: {type(result)}")


def format_headers(
    headers: list[Header],
    format: OutputFormat = OutputFormat.PRETTY,
) -> str:
    """Format parsed headers, one per line.

    Args:
        headers: Parsed headers
        format: Output format

    Returns:
        Formatted string representation
    """
    if format == OutputFormat.JSON:
        data = [
            {
                "accession": header.accession_or_rest,
                "database": header.database_type.value,
                "species": header.taxonomy,
                "description": header.description,
            }
            for header in headers
        ]
        return json.dumps(data, indent=2)

    elif format == OutputFormat.TSV:
        lines = ["accession\tdatabase\tspecies\tdescription"]
        for header in headers:
            lines.append(
                f"{header.accession_or_rest}\t{header.database_type.value}\t"
                f"{_na(header.taxonomy)}\t{_na(header.description)}"
            )
        return "\n".join(lines)

    elif format == OutputFormat.PRETTY:
        width = max((len(header.accession_or_rest) for header in headers), default=0)
        return "\n".join(
            f"{header.accession_or_rest:<{width}}  {header.description or header.rest or ''}"
            for header in headers
        )

    else:
        raise ValueError(f"Unknown format: {format}")
