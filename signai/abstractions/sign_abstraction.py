from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, TypeAlias

from signai.abstractions.abstract_domain import Domain

Tag: TypeAlias = Literal["Bot", "Top", "-", "0", "+"]

# Truth values are signs: "0" is false, any other sign is true.
TRUE: Tag = "+"
FALSE: Tag = "0"


@dataclass(frozen=True)
class Sign(Domain[int]):
    """
    The flat sign lattice: bottom below the three incomparable signs
    "-", "0" and "+", all of them below top.
    """
    tag: Tag

    def __post_init__(self):
        assert self.tag in ("Bot", "Top", "-", "0", "+"), f"Unknown sign {self.tag!r}"

    @classmethod
    def bottom(cls) -> Sign:
        return BOTTOM

    @classmethod
    def top(cls) -> Sign:
        return TOP

    @classmethod
    def abstraction(cls, value: int) -> Sign:
        """Map a concrete integer to its sign."""
        if value > 0:
            return POSITIVE
        elif value < 0:
            return NEGATIVE
        return ZERO

    def concretize(self, value: int) -> bool:
        """True iff this abstract element allows value."""
        if self.tag == "Top":
            return True
        return self.tag == Sign.abstraction(value).tag

    ### Lattice

    def leq(self, other: Sign) -> bool:
        if self.tag == "Bot" or other.tag == "Top":
            return True
        return self.tag == other.tag

    def join(self, other: Sign) -> Sign:
        if self == other:
            return self
        if self.tag == "Bot":
            return other
        if other.tag == "Bot":
            return self
        return TOP

    ### Abstract arithmetic

    @staticmethod
    def _lift_bin(a: Sign, b: Sign, table: dict[tuple[Tag, Tag], Tag]) -> Sign:
        # bottom dominates top
        if a.tag == "Bot" or b.tag == "Bot":
            return BOTTOM
        return Sign(table.get((a.tag, b.tag), "Top"))

    # Addition
    def add(self, other: Sign) -> Sign:
        add_table: dict[tuple[Tag, Tag], Tag] = {
            ("+", "+"): "+",
            ("+", "0"): "+",
            ("0", "+"): "+",
            ("-", "-"): "-",
            ("-", "0"): "-",
            ("0", "-"): "-",
            ("0", "0"): "0",
        }
        return self._lift_bin(self, other, add_table)

    def __add__(self, other: Sign) -> Sign:
        return self.add(other)

    ### Comparisons, answered as truth signs

    def equal(self, other: Sign) -> Sign:
        if self.tag == "Bot" or other.tag == "Bot":
            return BOTTOM
        if self.tag == "Top" or other.tag == "Top":
            return TOP
        return Sign(TRUE if self.tag == other.tag else FALSE)

    def less(self, other: Sign) -> Sign:
        less_table: dict[tuple[Tag, Tag], Tag] = {
            ("0", "0"): FALSE,
            ("-", "+"): TRUE,
            ("0", "+"): TRUE,
            ("-", "0"): TRUE,
            ("+", "-"): FALSE,
            ("+", "0"): FALSE,
            ("0", "-"): FALSE,
        }
        return self._lift_bin(self, other, less_table)

    def logical_not(self) -> Sign:
        """Negation of a truth value, not of a sign: "-" counts as true."""
        match self.tag:
            case "Bot" | "Top":
                return self
            case "0":
                return Sign(TRUE)
            case _:
                return Sign(FALSE)

    def __invert__(self) -> Sign:
        return self.logical_not()

    # Pretty
    def __str__(self) -> str:
        return self.tag

    def __repr__(self) -> str:
        return f"Sign({self.tag})"


BOTTOM = Sign("Bot")
TOP = Sign("Top")
NEGATIVE = Sign("-")
ZERO = Sign("0")
POSITIVE = Sign("+")
