"""
Atom map number scanner.

Locates bracket atoms in a mapped SMILES string and extracts each atom map
number together with the exact character span of its digits. Only a colon
inside an open bracket introduces a map number; a colon between atoms is
the aromatic bond symbol and is skipped.

    >>> [occ.tag for occ in scan_tags("[CH3:4][OH:2]")]
    [4, 2]

The scanner does not build a molecule and does not validate anything
beyond bracket balance and the shape of each map number.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from chiremap.exceptions import MalformedInputError
from chiremap.types import TagOccurrence

BRACKET_OPEN: Final[str] = "["
BRACKET_CLOSE: Final[str] = "]"
TAG_PREFIX: Final[str] = ":"
DIGITS: Final[frozenset[str]] = frozenset("0123456789")
# Below the digit limit CPython applies to int() on decimal strings
MAX_NUMBER_DIGITS: Final[int] = 4000


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as '²'
    return char in DIGITS


class _Tokenizer:
    """Character cursor over a notation string."""
    
    __slots__ = ("_string", "_pos")
    
    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0
    
    @property
    def position(self) -> int:
        """Current position in the string."""
        return self._pos
    
    def peek(self) -> str | None:
        """Character at the current position, or None past the end."""
        if self._pos >= len(self._string):
            return None
        return self._string[self._pos]
    
    def next(self) -> str | None:
        """Consume and return the next character."""
        if self._pos >= len(self._string):
            return None
        char = self._string[self._pos]
        self._pos += 1
        return char
    
    def read_while(self, predicate) -> str:
        """Read characters while predicate is true."""
        start = self._pos
        while self._pos < len(self._string) and predicate(self._string[self._pos]):
            self._pos += 1
        return self._string[start:self._pos]
    
    def is_eof(self) -> bool:
        return self._pos >= len(self._string)


class TagScanner:
    """Single-pass scanner for bracket atoms and their map numbers.
    
    Raises MalformedInputError when:
        - a ']' has no matching '['
        - a '[' is opened inside another bracket atom
        - a '[' is still open at the end of the string
        - a ':' inside a bracket atom is not followed by digits
        - a map number is zero
    
    Example:
        >>> scanner = TagScanner("C[C:3]([H:16])")
        >>> [(o.tag, o.span) for o in scanner.scan()]
        [(3, (4, 5)), (16, (10, 12))]
    """
    
    def __init__(self, notation: str) -> None:
        self._notation = notation
        self._tokenizer = _Tokenizer(notation)
        self._brackets: list[tuple[int, int]] = []
        self._tags: list[TagOccurrence] = []
    
    def scan(self) -> list[TagOccurrence]:
        """Scan the whole string.
        
        Returns:
            Map number occurrences in left-to-right order.
        """
        tok = self._tokenizer
        open_at: int | None = None
        
        while not tok.is_eof():
            pos = tok.position
            char = tok.next()
            
            if char == BRACKET_OPEN:
                if open_at is not None:
                    raise MalformedInputError(
                        f"Nested '{BRACKET_OPEN}' inside bracket atom opened at {open_at}",
                        self._notation,
                        pos,
                    )
                open_at = pos
            elif char == BRACKET_CLOSE:
                if open_at is None:
                    raise MalformedInputError(
                        f"Unmatched '{BRACKET_CLOSE}'",
                        self._notation,
                        pos,
                    )
                self._brackets.append((open_at, pos + 1))
                open_at = None
            elif char == TAG_PREFIX and open_at is not None:
                self._tags.append(self._read_tag())
        
        if open_at is not None:
            raise MalformedInputError(
                f"Unclosed '{BRACKET_OPEN}'",
                self._notation,
                open_at,
            )
        
        return self._tags
    
    @property
    def brackets(self) -> list[tuple[int, int]]:
        """Bracket atom spans, brackets included, collected by scan()."""
        return self._brackets
    
    def _read_tag(self) -> TagOccurrence:
        """Read the map number that follows an in-bracket colon."""
        tok = self._tokenizer
        start = tok.position
        digits = tok.read_while(_is_digit)
        
        if not digits:
            found = tok.peek()
            raise MalformedInputError(
                f"Expected atom map number after '{TAG_PREFIX}', "
                f"got {repr(found) if found is not None else 'end of string'}",
                self._notation,
                start,
            )
        
        if len(digits) > MAX_NUMBER_DIGITS:
            raise MalformedInputError(
                f"Atom map number too long ({len(digits)} digits)",
                self._notation,
                start,
            )
        
        tag = int(digits)
        
        if tag == 0:
            raise MalformedInputError(
                "Atom map number must be positive",
                self._notation,
                start,
            )
        
        return TagOccurrence(tag=tag, start=start, end=tok.position)


def scan_tags(notation: str) -> list[TagOccurrence]:
    """Find every atom map number in a mapped SMILES string.
    
    This is a convenience function that creates a TagScanner and calls
    scan().
    
    Args:
        notation: Mapped SMILES string.
    
    Returns:
        Occurrences in order of appearance.
    
    Raises:
        MalformedInputError: If brackets are unbalanced or a map number is
            missing or zero.
    """
    return TagScanner(notation).scan()


def iter_bracket_atoms(notation: str) -> Iterator[tuple[int, int]]:
    """Yield the (start, end) span of every bracket atom in the string."""
    scanner = TagScanner(notation)
    scanner.scan()
    yield from scanner.brackets
