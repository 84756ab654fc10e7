"""
Custom exceptions for chiremap.

Every failure the renumbering engine can report is a subclass of
RenumberError, so a caller processing many records can catch one type per
record and move on to the next.
"""

from __future__ import annotations


class RenumberError(Exception):
    """Base exception for all renumbering errors."""
    
    pass


class MalformedInputError(RenumberError):
    """Structurally invalid mapped SMILES.
    
    Raised for unbalanced or nested brackets and for a colon inside a
    bracket atom that is not followed by a positive atom map number.
    
    Attributes:
        message: Description of what went wrong.
        notation: The string being scanned.
        position: Character position in the string where the error occurred.
    """
    
    def __init__(
        self,
        message: str,
        notation: str | None = None,
        position: int | None = None,
    ) -> None:
        self.message = message
        self.notation = notation
        self.position = position
        
        parts = [message]
        if notation is not None and position is not None:
            parts.append(f"\n  {notation}")
            parts.append(f"\n  {' ' * position}^")
        elif notation is not None:
            parts.append(f" in: {notation}")
        
        super().__init__("".join(parts))


class RecordFormatError(MalformedInputError):
    """A record line does not have the `<id> <smiles> (<i0>, ...)` layout."""
    
    pass


class EmptyInputError(RenumberError):
    """The notation contains no atom map numbers."""
    
    def __init__(self, message: str = "No atom map numbers found") -> None:
        self.message = message
        super().__init__(message)


class DuplicateTagError(RenumberError):
    """The same atom map number appears on more than one atom.
    
    Attributes:
        tag: The repeated map number.
    """
    
    def __init__(self, tag: int) -> None:
        self.tag = tag
        self.message = f"Atom map number {tag} appears more than once"
        super().__init__(self.message)


class OutOfRangeError(RenumberError):
    """An index refers to an atom map number absent from the notation.
    
    Attributes:
        index: The offending zero-based index value.
        position: Position of the value within the index tuple.
    """
    
    def __init__(self, index: int, position: int | None = None) -> None:
        self.index = index
        self.position = position
        where = f" at position {position}" if position is not None else ""
        self.message = (
            f"Index {index}{where} refers to atom map number {index + 1}, "
            f"which is not present in the notation"
        )
        super().__init__(self.message)
