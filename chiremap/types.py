"""
Core data types for atom map renumbering.

This module defines the values that flow through the engine: tag
occurrences found by the scanner, the renumbering bijection, and the
record/result containers handed back to callers. All of them are built
fresh for each notation and never shared.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TagOccurrence:
    """One atom map number found in a mapped SMILES string.
    
    Attributes:
        tag: The atom map number as written.
        start: Index of the first digit in the notation.
        end: Index one past the last digit (half-open).
    """
    
    tag: int
    start: int
    end: int
    
    @property
    def span(self) -> tuple[int, int]:
        """Half-open character range of the digits."""
        return (self.start, self.end)
    
    def __len__(self) -> int:
        return self.end - self.start


class RenumberMap(Mapping[int, int]):
    """Dense, order-preserving bijection from old to new atom map numbers.
    
    New numbers run over 1..K without gaps, where K is the number of
    distinct old numbers, and a < b implies map[a] < map[b].
    
    Example:
        >>> m = RenumberMap.from_tags([7, 3, 12])
        >>> m[3], m[7], m[12]
        (1, 2, 3)
    """
    
    __slots__ = ("_forward",)
    
    def __init__(self, forward: dict[int, int]) -> None:
        self._forward = dict(sorted(forward.items()))
    
    @classmethod
    def from_tags(cls, tags) -> RenumberMap:
        """Rank distinct tags ascending, starting at 1."""
        return cls({old: new for new, old in enumerate(sorted(set(tags)), start=1)})
    
    def __getitem__(self, old: int) -> int:
        return self._forward[old]
    
    def __iter__(self) -> Iterator[int]:
        return iter(self._forward)
    
    def __len__(self) -> int:
        return len(self._forward)
    
    def __repr__(self) -> str:
        return f"RenumberMap({self._forward!r})"
    
    @property
    def is_identity(self) -> bool:
        """True if every tag keeps its number."""
        return all(old == new for old, new in self._forward.items())
    

@dataclass(frozen=True, slots=True)
class Record:
    """One input or output line, already split into its fields.
    
    Attributes:
        identifier: Opaque token, echoed unchanged.
        notation: Mapped SMILES string.
        indices: Zero-based atom references (map number minus one).
    """
    
    identifier: str
    notation: str
    indices: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class RenumberResult:
    """Output of renumbering one notation and its index tuple."""
    
    notation: str
    indices: tuple[int, ...]
    mapping: RenumberMap
