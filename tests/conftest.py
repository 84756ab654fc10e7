"""Test configuration and fixtures for chiremap tests."""

import pytest

# RDKit is used as an independent reference parser for atom map numbers
from rdkit import Chem

from chiremap import Record


WORKED_INPUT = (
    "t61g [C:3]([N+:4]1([C:5]([C:6]([H:16])([H:17])[H:18])([H:14])[H:15])"
    "[C:7]([H:19])([H:20])[C:8]1([H:21])[H:22])([H:12])[H:13] (2, 3, 6, 18)"
)

WORKED_OUTPUT = (
    "t61g [C:1]([N+:2]1([C:3]([C:4]([H:11])([H:12])[H:13])([H:9])[H:10])"
    "[C:5]([H:14])([H:15])[C:6]1([H:16])[H:17])([H:7])[H:8] (0, 1, 4, 13)"
)


def rdkit_map_numbers(smiles: str) -> list[int]:
    """Get atom map numbers in atom order from RDKit for comparison.
    
    Explicit hydrogens are kept so every mapped atom is reported.
    
    Args:
        smiles: Mapped SMILES string.
        
    Returns:
        Map number of each atom, 0 for unmapped atoms.
    """
    params = Chem.SmilesParserParams()
    params.removeHs = False
    mol = Chem.MolFromSmiles(smiles, params)
    if mol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")
    return [atom.GetAtomMapNum() for atom in mol.GetAtoms()]


@pytest.fixture
def worked_record() -> Record:
    """Sparse record left over after deleting atoms 9-11 from a molecule."""
    identifier, rest = WORKED_INPUT.split(" ", 1)
    notation, _ = rest.split(" ", 1)
    return Record(identifier, notation, (2, 3, 6, 18))


@pytest.fixture
def sparse_smiles() -> list[str]:
    """Mapped SMILES with gaps in their map numbers."""
    return [
        "[CH4:7]",
        "[CH3:2][OH:9]",
        "[CH3:10][CH2:3][CH2:40][OH:22]",
        "[cH:5]1[cH:9][cH:2][cH:30][cH:11][cH:6]1",
        "[NH2:14][CH2:3][C:8](=[O:2])[OH:21]",
        "[CH3:100][Cl:7]",
        "[CH2:5]=[CH:50]/[CH:15]=[CH:8]/[CH3:99]",
    ]


@pytest.fixture
def dense_smiles() -> list[str]:
    """Mapped SMILES whose map numbers are already 1..K."""
    return [
        "[CH4:1]",
        "[CH3:1][OH:2]",
        "[CH3:2][OH:1]",
        "[cH:1]1[cH:2][cH:3][cH:4][cH:5][cH:6]1",
        "[NH3+:3][CH2:1][C:2](=[O:4])[O-:5]",
    ]
