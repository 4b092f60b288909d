"""FASTA header parsing.

Headers are recognised by the conventions of the major protein databases.
The first convention that matches wins; anything unrecognised is kept
verbatim as ``rest`` so that no information is lost.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class ProteinDatabase(Enum):
    """Databases a header can originate from."""

    UNIPROT = "UniProtKB"
    NCBI = "NCBI"
    IPI = "IPI"
    NEXTPROT = "neXtProt"
    UNIREF = "UniRef"
    GENERIC = "Generic"
    UNKNOWN = "Unknown"


_DATABASE_BY_ID = {
    "sp": ProteinDatabase.UNIPROT,
    "tr": ProteinDatabase.UNIPROT,
    "sw": ProteinDatabase.UNIPROT,
    "gi": ProteinDatabase.NCBI,
    "IPI": ProteinDatabase.IPI,
    "nxp": ProteinDatabase.NEXTPROT,
    "UniRef": ProteinDatabase.UNIREF,
    "": ProteinDatabase.GENERIC,
}

_LOCATION = re.compile(r"^(.*?) \((\d+)-(\d+)\)$")
_UNIPROT = re.compile(r"^(sp|tr)\|([^|]+)\|(.*)$")
_SWISSPROT_OLD = re.compile(r"^(\S+_\S+) \(([PQOA]\S+)\) (.*)$")
_SWISSPROT_9 = re.compile(r"^([POQA]\S*)\|(\S+_\S+ .*)$")
_UNIREF = re.compile(r"^(UniRef\d+_\S+)\s*(.*)$")
_ENZYMICITY = re.compile(r"^\(\*.*?\*\)")
_PARENTHESIZED = re.compile(r"\(([^)]*)\)")

_UNIPROT_SPECIES = re.compile(r"\bOS=(.+?)(?= [A-Z]{2}=|$)")
_UNIREF_SPECIES = re.compile(r"\bTax=(.+?)(?= \w+=|$)")
_NCBI_SPECIES = re.compile(r"\[([^\[\]]+)\]\s*$")


@dataclass(frozen=True)
class Header:
    """A parsed FASTA header line."""

    raw_line: str  # Trimmed header line, including the leading '>'
    id: str | None = None  # Database tag ('sp', 'gi', ...), '' if generic, None if unknown
    accession: str | None = None
    description: str | None = None
    rest: str | None = None  # Unparsed text of unrecognised headers
    foreign_id: str | None = None
    foreign_accession: str | None = None
    foreign_description: str | None = None
    start: int | None = None
    end: int | None = None
    addenda: str | None = None

    @property
    def accession_or_rest(self) -> str:
        """Accession, or the first token of an unrecognised header."""
        if self.accession is not None:
            return self.accession
        rest = self.rest or ""
        tokens = rest.split()
        return tokens[0] if tokens else rest

    @property
    def database_type(self) -> ProteinDatabase:
        """Database the header format belongs to."""
        if self.id is None:
            return ProteinDatabase.UNKNOWN
        return _DATABASE_BY_ID.get(self.id, ProteinDatabase.GENERIC)

    @property
    def taxonomy(self) -> str | None:
        """Species name, when the header format carries one."""
        if not self.description:
            return None
        database = self.database_type
        if database == ProteinDatabase.UNIPROT:
            match = _UNIPROT_SPECIES.search(self.description)
        elif database == ProteinDatabase.UNIREF:
            match = _UNIREF_SPECIES.search(self.description)
        elif database == ProteinDatabase.NCBI:
            match = _NCBI_SPECIES.search(self.description)
        else:
            return None
        return match.group(1).strip() if match else None

    def __str__(self) -> str:
        return self.raw_line


def _split_location(accession: str) -> tuple[str, int | None, int | None]:
    """Split a trailing ' (start-end)' location off an accession."""
    match = _LOCATION.match(accession)
    if match is None:
        return accession, None, None
    return match.group(1), int(match.group(2)), int(match.group(3))


def _tokens(text: str) -> list[str]:
    """Pipe-separated fields, skipping empty ones."""
    return [token for token in text.split("|") if token]


def _accession_fields(database_id: str, accession: str, description: str | None) -> dict:
    accession, start, end = _split_location(accession.strip())
    return {
        "id": database_id,
        "accession": accession,
        "description": description,
        "start": start,
        "end": end,
    }


def _parse_uniprot(text: str) -> dict | None:
    # >sp|A7GKH8|PURL_BACCN Phosphoribosylformylglycinamidine synthase 2 OS=...
    match = _UNIPROT.match(text)
    if match is None:
        return None
    return _accession_fields(match.group(1), match.group(2), match.group(3))


def _parse_swissprot(text: str) -> dict | None:
    # >sw|O95229|ZWIN_HUMAN ZW10 interactor
    if not text.lower().startswith("sw|"):
        return None
    tokens = _tokens(text)
    if len(tokens) < 3:
        # Not the expected '>sw|Pxxxx|ACTB_HUMAN ...' layout
        return None
    fields = _accession_fields("sw", tokens[1], tokens[2])
    if len(tokens) > 3:
        fields["rest"] = "".join(tokens[3:])
    return fields


def _parse_ncbi(text: str) -> dict | None:
    # >gi|20149565|ref|NP_004878.2| small inducible cytokine B14 precursor [Homo sapiens]
    if not text.lower().startswith("gi|"):
        return None
    tokens = _tokens(text)
    if len(tokens) == 3:
        return _accession_fields("gi", tokens[1], tokens[2].strip())
    if len(tokens) < 4:
        # Not the expected '>gi|xxxxx|xx|xxxxx|(x) ...' layout
        return None

    fields = _accession_fields("gi", tokens[1], None)
    fields["foreign_id"] = tokens[2]
    if len(tokens) >= 5:
        fields["foreign_accession"] = tokens[3]
        remainder = "".join(tokens[4:])
    else:
        remainder = "".join(tokens[3:])

    if remainder.startswith(" "):
        fields["description"] = remainder[1:]
    else:
        foreign_description, _, description = remainder.partition(" ")
        fields["foreign_description"] = foreign_description
        fields["description"] = description
    return fields


def _parse_ipi(text: str) -> dict | None:
    # >IPI:IPI00232014.1|REFSEQ_XP:XP_303976 Tax_Id=9606 hypothetical protein
    if text[:4].upper() not in ("IPI:", "IPI|"):
        return None
    accession, _, description = text[4:].partition("|")
    return _accession_fields("IPI", accession, description)


def _parse_nextprot(text: str) -> dict | None:
    # >nxp|NX_P02768-1|ALB|Serum albumin|Iso 1
    if not text.startswith("nxp|"):
        return None
    parts = text.split("|", 2)
    description = parts[2] if len(parts) > 2 else ""
    accession = parts[1]
    return _accession_fields("nxp", accession, description)


def _parse_uniref(text: str) -> dict | None:
    # >UniRef100_U3PVA8 Protein IroK n=22 Tax=Escherichia coli RepID=IROK_ECOL
    match = _UNIREF.match(text)
    if match is None:
        return None
    return _accession_fields("UniRef", match.group(1), match.group(2))


def _parse_swissprot_expasy(text: str) -> dict | None:
    # Pre-9.0 Expasy: >K1CI_HUMAN (P35527) Keratin, type I cytoskeletal 9
    match = _SWISSPROT_OLD.match(text)
    if match is not None:
        return _accession_fields("sw", match.group(2), f"{match.group(1)} {match.group(3)}")
    # 9.0 and later: >P19084|11S3_HELAN 11S globulin seed storage protein G3
    match = _SWISSPROT_9.match(text)
    if match is not None:
        return _accession_fields("sw", match.group(1), match.group(2))
    return None


def _parse_generic(text: str) -> dict | None:
    # >NP0002A (NP0002A) hypothetical protein
    accession, _, description = text.partition(" ")
    description = description.strip()
    if not accession or "(" not in description:
        return None

    start = end = None
    location = re.match(r"^\((\d+)-(\d+)\)\s*(.*)$", description)
    if location is not None:
        start, end = int(location.group(1)), int(location.group(2))
        description = location.group(3)

    # Skip an enzymicity annotation such as '(*CE*)' before the repeated accession
    offset = 0
    enzymicity = _ENZYMICITY.match(description)
    if enzymicity is not None:
        offset = enzymicity.end()
    repeated = _PARENTHESIZED.search(description, offset)
    if repeated is None or repeated.group(1).strip() != accession:
        return None

    return {
        "id": "",
        "accession": accession,
        "description": description,
        "start": start,
        "end": end,
    }


_PARSERS: list[Callable[[str], dict | None]] = [
    _parse_uniprot,
    _parse_swissprot,
    _parse_ncbi,
    _parse_ipi,
    _parse_nextprot,
    _parse_uniref,
    _parse_swissprot_expasy,
    _parse_generic,
]


def parse_header(line: str) -> Header:
    """Parse a FASTA header line.

    Args:
        line: Header line, starting with '>'

    Returns:
        Parsed Header

    Raises:
        ValueError: If the line does not start with '>'
    """
    line = line.strip()
    if not line.startswith(">"):
        raise ValueError(f"Not a FASTA header: '{line}'")

    text = line[1:]
    addenda = None
    position = text.find("^A")
    if position >= 0:
        addenda = text[position:]
        text = text[:position]

    for parser in _PARSERS:
        fields = parser(text)
        if fields is not None:
            return Header(raw_line=line, addenda=addenda, **fields)

    rest = text.strip()
    start = end = None
    location = _LOCATION.match(rest)
    if location is not None:
        rest, start, end = location.group(1), int(location.group(2)), int(location.group(3))
    return Header(raw_line=line, rest=rest, start=start, end=end, addenda=addenda)
