"""Tests for the command-line interface."""

import json
from pathlib import Path

from typer.testing import CliRunner

from protfasta import __version__
from protfasta.cli import FileProgressColumn, app, create_file_progress

runner = CliRunner()

SAMPLE_FASTA = """\
>sp|P1|A_HUMAN Protein A OS=Homo sapiens OX=9606 GN=A PE=1 SV=1
MKTAYIAK
QRQISFVK
>sp|P2|B_MOUSE Protein B OS=Mus musculus OX=10090 GN=B PE=1 SV=1
MCCCAA
>sp|P1_REVERSED|A_HUMAN-REVERSED Protein A OS=Homo sapiens OX=9606 GN=A PE=1 SV=1
KAIYATKM
"""


def write_fasta_file(tmp_path: Path, content: str = SAMPLE_FASTA) -> Path:
    fasta_file = tmp_path / "sample.fasta"
    fasta_file.write_text(content, encoding="utf-8")
    return fasta_file


class TestCli:
    """Tests for the protfasta command."""

    def test_version(self) -> None:
        """Test the --version option."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"protfasta {__version__}" in result.output

    def test_summary(self, tmp_path: Path) -> None:
        """Test the summary command."""
        result = runner.invoke(app, ["summary", str(write_fasta_file(tmp_path))])

        assert result.exit_code == 0
        assert "FASTA Summary: sample" in result.output
        assert "3 (2 target, 1 decoy)" in result.output
        assert "Homo sapiens: 2" in result.output

    def test_summary_tsv(self, tmp_path: Path) -> None:
        """Test summary output as TSV."""
        result = runner.invoke(app, ["summary", str(write_fasta_file(tmp_path)), "-f", "tsv"])

        assert result.exit_code == 0
        assert "name\tn_sequences\tn_target\tn_decoy\tdatabase" in result.output
        assert "sample\t3\t2\t1\tUniProtKB" in result.output

    def test_scan_json(self, tmp_path: Path) -> None:
        """Test the scan command with JSON output."""
        result = runner.invoke(app, ["scan", str(write_fasta_file(tmp_path)), "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["n_records"] == 3
        assert data["total_residues"] == 30
        assert data["min_length"] == 6
        assert data["max_length"] == 16

    def test_scan_with_workers(self, tmp_path: Path) -> None:
        """Test the scan command with several threads."""
        result = runner.invoke(app, ["scan", str(write_fasta_file(tmp_path)), "-w", "2"])

        assert result.exit_code == 0
        assert "Proteins:  3" in result.output

    def test_scan_malformed(self, tmp_path: Path) -> None:
        """Test that a malformed record fails the scan."""
        fasta_file = write_fasta_file(tmp_path, ">P1\nMKT\n>P2\n")

        result = runner.invoke(app, ["scan", str(fasta_file)])

        assert result.exit_code == 1
        assert "Error: No sequence found for header 'P2'" in result.output

    def test_scan_keep_going(self, tmp_path: Path) -> None:
        """Test that --keep-going reports the bad record as a warning."""
        fasta_file = write_fasta_file(tmp_path, ">P1\nMKT\n>P2\n>P3\nMK1\n>P4\nAAA\n")

        result = runner.invoke(app, ["scan", str(fasta_file), "--sanitize", "--keep-going"])

        assert result.exit_code == 0
        assert "Warning:" in result.output
        assert "Proteins:  2" in result.output

    def test_headers_json(self, tmp_path: Path) -> None:
        """Test the headers command with JSON output."""
        result = runner.invoke(app, ["headers", str(write_fasta_file(tmp_path)), "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [entry["accession"] for entry in data] == ["P1", "P2", "P1_REVERSED"]
        assert data[1]["species"] == "Mus musculus"
        assert data[0]["database"] == "UniProtKB"

    def test_headers_pretty(self, tmp_path: Path) -> None:
        """Test the aligned header listing."""
        result = runner.invoke(app, ["headers", str(write_fasta_file(tmp_path))])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("P1".ljust(len("P1_REVERSED")) + "  A_HUMAN Protein A")

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file exits with an error."""
        result = runner.invoke(app, ["headers", str(tmp_path / "missing.fasta")])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_unknown_encoding(self, tmp_path: Path) -> None:
        """Test that an unknown encoding exits with an error."""
        result = runner.invoke(
            app, ["scan", str(write_fasta_file(tmp_path)), "-e", "no-such-encoding"]
        )

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_format(self, tmp_path: Path) -> None:
        """Test that an unknown output format is rejected."""
        result = runner.invoke(app, ["scan", str(write_fasta_file(tmp_path)), "-f", "xml"])

        assert result.exit_code == 1
        assert "Invalid format" in result.output


class TestFileProgress:
    """Tests for the file progress display."""

    def test_shade_follows_fraction_read(self) -> None:
        """Test that the bar colour moves from the first to the last shade."""
        column = FileProgressColumn()
        shades = [column.shade_for(fraction / 10) for fraction in range(11)]

        assert shades[0] == FileProgressColumn.SHADES[0]
        assert shades[-1] == FileProgressColumn.SHADES[-1]
        indices = [FileProgressColumn.SHADES.index(shade) for shade in shades]
        assert indices == sorted(indices)

    def test_shade_clamped(self) -> None:
        """Test that out-of-range fractions use the end shades."""
        column = FileProgressColumn()

        assert column.shade_for(-0.5) == FileProgressColumn.SHADES[0]
        assert column.shade_for(1.5) == FileProgressColumn.SHADES[-1]

    def test_progress_columns(self) -> None:
        """Test that the display carries the file progress bar."""
        progress = create_file_progress()

        assert any(isinstance(column, FileProgressColumn) for column in progress.columns)
