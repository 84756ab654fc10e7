"""
Chiremap - atom map renumbering for mapped SMILES.

Compacts the atom map numbers of a mapped SMILES string to 1..K, keeping
their order, and applies the same renumbering to a tuple of zero-based
atom indices that refer to them.

    >>> from chiremap import renumber
    >>> result = renumber("[CH3:4][CH2:9][OH:12]", (3, 11))
    >>> result.notation
    '[CH3:1][CH2:2][OH:3]'
    >>> result.indices
    (0, 2)

Submodules:
    chiremap.scanner  - Bracket atom and map number scanning
    chiremap.renumber - Map building, rewriting and index translation
    chiremap.record   - `<id> <smiles> (<indices>)` line codec
    chiremap.cli      - Command line driver
"""

__version__ = "0.1.0"
__author__ = "Vladimir Lekić"

# Core types
from chiremap.types import Record, RenumberMap, RenumberResult, TagOccurrence

# Scanning
from chiremap.scanner import TagScanner, iter_bracket_atoms, scan_tags

# Renumbering
from chiremap.renumber import (
    build_renumber_map,
    is_dense,
    renumber,
    renumber_notation,
    renumber_record,
    rewrite_notation,
    translate_indices,
)

# Record lines
from chiremap.record import format_record, parse_record, process_line

# Exceptions
from chiremap.exceptions import (
    DuplicateTagError,
    EmptyInputError,
    MalformedInputError,
    OutOfRangeError,
    RecordFormatError,
    RenumberError,
)

__all__ = [
    # Types
    "Record", "RenumberMap", "RenumberResult", "TagOccurrence",
    # Scanning
    "TagScanner", "iter_bracket_atoms", "scan_tags",
    # Renumbering
    "build_renumber_map", "is_dense", "renumber", "renumber_notation",
    "renumber_record", "rewrite_notation", "translate_indices",
    # Records
    "format_record", "parse_record", "process_line",
    # Exceptions
    "RenumberError", "MalformedInputError", "RecordFormatError",
    "EmptyInputError", "DuplicateTagError", "OutOfRangeError",
]
