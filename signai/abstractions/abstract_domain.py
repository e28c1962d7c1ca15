from abc import ABC, abstractmethod
from typing import Generic, Iterable, Self, TypeVar

V = TypeVar("V")


class Lattice(ABC):
    """
    Abstract superclass for the lattices the analysis iterates over.

    Implementations must have finite height (or supply a widening), since
    the fixpoint engine relies on ascending chains being finite.
    """

    @classmethod
    @abstractmethod
    def bottom(cls) -> Self: ...

    @abstractmethod
    def leq(self, other: Self) -> bool: ...

    @abstractmethod
    def join(self, other: Self) -> Self: ...

    def __le__(self, other: Self) -> bool:
        return self.leq(other)

    def __or__(self, other: Self) -> Self:
        return self.join(other)


class Domain(Lattice, Generic[V]):
    """
    Abstract superclass for any Abstract Domain for concrete value V.
    """

    @classmethod
    @abstractmethod
    def top(cls) -> Self: ...

    @classmethod
    @abstractmethod
    def abstraction(cls, value: V) -> Self: ...

    @classmethod
    def abstract(cls, elems: Iterable[V]) -> Self:
        """Join of the abstraction of every element, bottom when empty."""
        out = cls.bottom()
        for e in elems:
            out = out.join(cls.abstraction(e))
        return out

    @abstractmethod
    def concretize(self, value: V) -> bool: ...

    def __contains__(self, value: V) -> bool:
        return self.concretize(value)
