"""
Dense atom map renumbering.

After atoms are deleted from a mapped molecule its atom map numbers are
left with gaps. This module compacts them to 1..K, keeping their relative
order, rewrites the SMILES in place, and translates an auxiliary tuple of
zero-based atom indices (map number minus one) with the same bijection.

    >>> result = renumber("[C:3][N:7][O:5]", (2, 6))
    >>> result.notation
    '[C:1][N:3][O:2]'
    >>> result.indices
    (0, 2)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from chiremap.exceptions import DuplicateTagError, EmptyInputError, OutOfRangeError
from chiremap.scanner import scan_tags
from chiremap.types import Record, RenumberMap, RenumberResult, TagOccurrence


def build_renumber_map(tags: Iterable[int]) -> RenumberMap:
    """Build the dense order-preserving renumbering for a list of tags.
    
    Args:
        tags: Atom map numbers in order of appearance.
    
    Returns:
        Mapping from each tag to its 1-based rank.
    
    Raises:
        EmptyInputError: If there are no tags.
        DuplicateTagError: If a tag appears twice.
    """
    seen: set[int] = set()
    for tag in tags:
        if tag in seen:
            raise DuplicateTagError(tag)
        seen.add(tag)
    
    if not seen:
        raise EmptyInputError()
    
    return RenumberMap.from_tags(seen)


def rewrite_notation(
    notation: str,
    occurrences: Sequence[TagOccurrence],
    mapping: RenumberMap,
) -> str:
    """Replace each occurrence's digits with its new map number.
    
    Occurrences are applied from the rightmost to the leftmost so that a
    replacement of different length never shifts a span still to be
    processed. Text outside the digit spans is left untouched.
    """
    out = notation
    for occ in sorted(occurrences, key=lambda o: o.start, reverse=True):
        out = out[:occ.start] + str(mapping[occ.tag]) + out[occ.end:]
    return out


def translate_indices(
    indices: Iterable[int],
    mapping: RenumberMap,
) -> tuple[int, ...]:
    """Apply the renumbering to zero-based atom indices.
    
    Index v refers to map number v + 1; the result is mapping[v + 1] - 1.
    
    Raises:
        OutOfRangeError: If v + 1 is not a map number in the notation.
    """
    translated = []
    for position, index in enumerate(indices):
        tag = index + 1
        if tag not in mapping:
            raise OutOfRangeError(index, position)
        translated.append(mapping[tag] - 1)
    return tuple(translated)


def renumber(notation: str, indices: Iterable[int] = ()) -> RenumberResult:
    """Renumber a mapped SMILES string and its index tuple together.
    
    Args:
        notation: Mapped SMILES string.
        indices: Zero-based atom indices into the same map numbers.
    
    Returns:
        RenumberResult with the rewritten string, translated indices and
        the mapping that was applied.
    
    Raises:
        MalformedInputError: If the notation cannot be scanned.
        EmptyInputError: If the notation has no map numbers.
        DuplicateTagError: If a map number repeats.
        OutOfRangeError: If an index has no matching map number.
    
    Example:
        >>> renumber("[C:10][C:20]", [19]).indices
        (1,)
    """
    occurrences = scan_tags(notation)
    mapping = build_renumber_map(occ.tag for occ in occurrences)
    return RenumberResult(
        notation=rewrite_notation(notation, occurrences, mapping),
        indices=translate_indices(indices, mapping),
        mapping=mapping,
    )


def renumber_record(record: Record) -> Record:
    """Renumber a record, keeping its identifier as is."""
    result = renumber(record.notation, record.indices)
    return Record(record.identifier, result.notation, result.indices)


def renumber_notation(notation: str) -> str:
    """Renumber only the SMILES string."""
    return renumber(notation).notation


def is_dense(notation: str) -> bool:
    """Check whether the map numbers are already exactly 1..K.
    
    Raises the same errors as renumber() for a notation that cannot be
    renumbered at all.
    """
    occurrences = scan_tags(notation)
    return build_renumber_map(occ.tag for occ in occurrences).is_identity
