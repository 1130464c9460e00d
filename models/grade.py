"""
models/grade.py
---------------
Domain models for the two pay grades every employee holds:
a role grade and a capability grade.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Role:
    """
    A role grade (e.g. 'A1' = associate, 'M1' = manager).

    Attributes:
        rank: Two-character grade code, the primary key.
        name: Human-readable grade name.
        amount: Monthly role pay in yen.
    """
    rank: str
    name: str
    amount: int

    def __str__(self) -> str:
        return f"{self.rank} {self.name} ({self.amount:,})"


@dataclass(frozen=True)
class Capability:
    """
    A capability grade, paid on top of the role grade.

    Attributes:
        rank: Two-character grade code, the primary key.
        name: Human-readable grade name.
        amount: Monthly capability pay in yen.
    """
    rank: str
    name: str
    amount: int

    def __str__(self) -> str:
        return f"{self.rank} {self.name} ({self.amount:,})"
