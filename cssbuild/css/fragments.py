from __future__ import annotations
from typing import ClassVar

__all__ = [
    "Fragment",
    "Element",
    "Id",
    "Class",
    "Attribute",
    "PseudoClass",
    "PseudoElement",
    "Combination",
    "RANKED",
]

class Fragment:
    """One rendered piece of a compound selector.

    `rank` is the canonical position of the kind inside a compound selector,
    `None` for structural pieces that are not order checked. `unique` kinds may
    appear at most once per selector.
    """
    rank: ClassVar[int | None] = None
    unique: ClassVar[bool] = False

    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Fragment):
            return type(self) is type(__value) and self.raw == __value.raw
        return False

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.raw))

class Element(Fragment):
    rank = 1
    unique = True

class Id(Fragment):
    rank = 2
    unique = True
    def __str__(self) -> str:
        return f"#{self.raw}"

class Class(Fragment):
    rank = 3
    def __str__(self) -> str:
        return f".{self.raw}"

class Attribute(Fragment):
    rank = 4
    def __str__(self) -> str:
        return f"[{self.raw}]"

class PseudoClass(Fragment):
    rank = 5
    def __str__(self) -> str:
        return f":{self.raw}"

class PseudoElement(Fragment):
    rank = 6
    unique = True
    def __str__(self) -> str:
        return f"::{self.raw}"

class Combination(Fragment):
    """Two already rendered selectors joined by a combinator."""
    def __init__(self, left: str, combinator: str, right: str):
        self.left = left
        self.combinator = combinator
        self.right = right
        super().__init__(f"{left} {combinator} {right}")

    def __repr__(self) -> str:
        return f"Combination({self.left!r}, {self.combinator!r}, {self.right!r})"

# Ordered by rank
RANKED: tuple[type[Fragment], ...] = (
    Element,
    Id,
    Class,
    Attribute,
    PseudoClass,
    PseudoElement,
)
