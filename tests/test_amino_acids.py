"""Tests for the amino acid alphabet."""

import pytest

from protfasta.core.amino_acids import DEFAULT_ALPHABET, AminoAcidAlphabet
from protfasta.core.errors import UnrecognizedResidue
from protfasta.data.amino_acids import AMINO_ACIDS, STANDARD_AMINO_ACIDS


class TestAlphabet:
    """Tests for residue lookup."""

    def test_alphabet_size(self) -> None:
        """Test the 20 standard, 2 rare and 4 ambiguity codes."""
        assert len(STANDARD_AMINO_ACIDS) == 20
        assert len(AMINO_ACIDS) == 26

    def test_lookup(self) -> None:
        """Test lookup of standard and rare residues in any case."""
        assert DEFAULT_ALPHABET.lookup("A") == "Alanine"
        assert DEFAULT_ALPHABET.lookup("w") == "Tryptophan"
        assert DEFAULT_ALPHABET.lookup("U") == "Selenocysteine"
        assert DEFAULT_ALPHABET.lookup("o") == "Pyrrolysine"

    def test_lookup_unknown(self) -> None:
        """Test that non-residue characters are not found."""
        assert DEFAULT_ALPHABET.lookup("1") is None
        assert DEFAULT_ALPHABET.lookup("*") is None
        assert DEFAULT_ALPHABET.lookup("-") is None

    def test_combinations(self) -> None:
        """Test ambiguity code detection."""
        for code in "BJZXbjzx":
            assert DEFAULT_ALPHABET.is_combination(code)
        assert not DEFAULT_ALPHABET.is_combination("A")
        assert not DEFAULT_ALPHABET.is_combination("U")


class TestSanitize:
    """Tests for sequence sanitization."""

    def test_marker_and_case(self) -> None:
        """Test that the '*' marker is dropped and residues upper-cased."""
        assert DEFAULT_ALPHABET.sanitize("AC*gK") == "ACGK"
        assert DEFAULT_ALPHABET.sanitize("*mkt*") == "MKT"

    def test_clean_sequence_unchanged(self) -> None:
        """Test that a valid upper-case sequence passes through."""
        sequence = "MKTAYIAKQRQISFVKSHFSRQ"
        assert DEFAULT_ALPHABET.sanitize(sequence) == sequence

    def test_ambiguity_codes_accepted(self) -> None:
        """Test that B, J, Z, X, U and O are valid residues."""
        assert DEFAULT_ALPHABET.sanitize("bjzxuo") == "BJZXUO"

    def test_unrecognized_residue(self) -> None:
        """Test that a digit is rejected with the offending character."""
        with pytest.raises(UnrecognizedResidue) as excinfo:
            DEFAULT_ALPHABET.sanitize("AC1K", accession="P12345")

        assert excinfo.value.residue == "1"
        assert excinfo.value.accession == "P12345"
        assert "P12345" in str(excinfo.value)
        assert isinstance(excinfo.value, ValueError)

    def test_empty_after_sanitize(self) -> None:
        """Test that a sequence of markers only becomes empty."""
        assert DEFAULT_ALPHABET.sanitize("***") == ""

    def test_custom_alphabet(self) -> None:
        """Test a restricted alphabet."""
        alphabet = AminoAcidAlphabet({"A": "Alanine", "G": "Glycine"})

        assert alphabet.sanitize("gaga") == "GAGA"
        with pytest.raises(UnrecognizedResidue):
            alphabet.sanitize("GAK")
