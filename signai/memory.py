"""
signai.memory

The abstract memory: a finite map from variable names to signs, ordered
and joined pointwise. Unbound variables read as bottom.

"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Self

from signai.abstractions.abstract_domain import Lattice
from signai.abstractions.sign_abstraction import BOTTOM, Sign


@dataclass(frozen=True)
class Memory(Lattice):
    """An immutable variable -> Sign map, updated by copying."""

    bindings: Mapping[str, Sign] = field(default_factory=dict)

    def __post_init__(self):
        # freeze a private copy so callers cannot mutate us through their dict
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    @classmethod
    def bottom(cls) -> Self:
        return cls()

    @classmethod
    def of(cls, **bindings: Sign) -> Self:
        return cls(bindings)

    def lookup(self, name: str) -> Sign:
        return self.bindings.get(name, BOTTOM)

    def __getitem__(self, name: str) -> Sign:
        return self.lookup(name)

    def bind(self, name: str, value: Sign) -> Self:
        new = dict(self.bindings)
        new[name] = value
        return type(self)(new)

    ## Lattice methods (order, join) ##

    def leq(self, other: "Memory") -> bool:
        # only the keys bound here matter, the others are bottom on our side
        return all(v <= other.lookup(k) for k, v in self.bindings.items())

    def join(self, other: "Memory") -> "Memory":
        out = dict(other.bindings)
        for k, v in self.bindings.items():
            out[k] = v | other.lookup(k)
        return type(self)(out)

    def items(self) -> list[tuple[str, Sign]]:
        return sorted(self.bindings.items())

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.bindings))

    def __len__(self) -> int:
        return len(self.bindings)

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Memory):
            return NotImplemented
        return dict(self.bindings) == dict(other.bindings)

    def __hash__(self) -> int:
        return hash(frozenset(self.bindings.items()))

    def __str__(self) -> str:
        return "\n".join(f"{k} -> {v}" for k, v in self.items())

    def __repr__(self) -> str:
        inside = ", ".join(f"{k}: {v}" for k, v in self.items())
        return f"Memory({{{inside}}})"
