"""
Record line codec.

A record is one line of the form

    <identifier> <mapped SMILES> (<i0>, <i1>, ..., <iN>)

for example ``t61g [C:3][N+:4]... (2, 3, 6, 18)``. This module splits such
a line into a Record and joins a Record back into a line. It knows nothing
about map numbers; that is the job of chiremap.renumber.
"""

from __future__ import annotations

from typing import Final

from chiremap.exceptions import RecordFormatError
from chiremap.renumber import renumber_record
from chiremap.scanner import DIGITS, MAX_NUMBER_DIGITS
from chiremap.types import Record

INDEX_OPEN: Final[str] = "("
INDEX_CLOSE: Final[str] = ")"
INDEX_SEPARATOR: Final[str] = ","
INDEX_JOINER: Final[str] = ", "


def _parse_index(text: str, line: str, position: int) -> int:
    """Parse one non-negative decimal index."""
    if not text or any(char not in DIGITS for char in text):
        raise RecordFormatError(
            f"Expected a non-negative integer index, got {text!r}",
            line,
            position,
        )
    if len(text) > MAX_NUMBER_DIGITS:
        raise RecordFormatError(
            f"Index too long ({len(text)} digits)",
            line,
            position,
        )
    return int(text)


def _parse_indices(text: str, line: str, offset: int) -> tuple[int, ...]:
    """Parse the parenthesized index list starting at line[offset]."""
    if not text.startswith(INDEX_OPEN):
        raise RecordFormatError(
            f"Expected '{INDEX_OPEN}' to start the index list",
            line,
            offset,
        )
    if not text.endswith(INDEX_CLOSE):
        raise RecordFormatError(
            f"Expected '{INDEX_CLOSE}' to end the index list",
            line,
            offset + len(text) - 1,
        )
    
    body = text[1:-1]
    indices = []
    pos = offset + 1
    for part in body.split(INDEX_SEPARATOR):
        leading = len(part) - len(part.lstrip())
        indices.append(_parse_index(part.strip(), line, pos + leading))
        pos += len(part) + 1
    return tuple(indices)


def parse_record(line: str) -> Record:
    """Split a record line into identifier, notation and indices.
    
    Args:
        line: One input line; surrounding whitespace is ignored.
    
    Returns:
        The parsed Record.
    
    Raises:
        RecordFormatError: If the line does not have three fields or the
            index list is not a non-empty list of non-negative integers.
    
    Example:
        >>> parse_record("m1 [C:2][O:5] (1, 4)")
        Record(identifier='m1', notation='[C:2][O:5]', indices=(1, 4))
    """
    stripped = line.strip()
    fields = stripped.split(None, 2)
    if len(fields) < 3:
        raise RecordFormatError(
            "Expected '<identifier> <smiles> (<indices>)'",
            stripped,
        )
    
    identifier, notation, rest = fields
    offset = len(stripped) - len(rest)
    indices = _parse_indices(rest, stripped, offset)
    return Record(identifier, notation, indices)


def format_record(record: Record) -> str:
    """Join a Record back into a single line."""
    joined = INDEX_JOINER.join(str(index) for index in record.indices)
    return f"{record.identifier} {record.notation} {INDEX_OPEN}{joined}{INDEX_CLOSE}"


def process_line(line: str) -> str:
    """Parse, renumber and format one record line.
    
    Raises:
        RenumberError: Any parse or renumbering failure for this line.
    """
    return format_record(renumber_record(parse_record(line)))
