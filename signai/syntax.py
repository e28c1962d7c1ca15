"""
signai.syntax

The abstract syntax of the analyzed language: integer expressions, where
truth values are integers (zero is false), and structured statements.

Trees are built directly by the caller, there is no parser. Every node
is a frozen dataclass, and `Expr` / `Stmt` are closed unions of the node
classes, so a `match` over them can be checked for exhaustiveness.

"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from functools import reduce
from typing import TypeAlias


class Node(ABC):
    """A node in the syntax tree."""

    def __post_init__(self):
        for f in fields(self):
            v = getattr(self, f.name)
            assert isinstance(v, f.type), (
                f"Expected {f.name!r} to be type {f.type.__name__}, but was {v!r}, in {type(self).__name__}"
            )

    @abstractmethod
    def __str__(self) -> str: ...


class Expression(Node):
    pass


class Statement(Node):
    pass


def _operand(e: Expression) -> str:
    if isinstance(e, (Num, Var, Not)):
        return str(e)
    return f"({e})"


@dataclass(frozen=True)
class Num(Expression):
    """An integer literal"""

    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Var(Expression):
    """A variable reference"""

    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Add(Expression):
    left: Expression
    right: Expression

    def __str__(self):
        return f"{_operand(self.left)} + {_operand(self.right)}"


@dataclass(frozen=True)
class Equal(Expression):
    left: Expression
    right: Expression

    def __str__(self):
        return f"{_operand(self.left)} == {_operand(self.right)}"


@dataclass(frozen=True)
class Less(Expression):
    left: Expression
    right: Expression

    def __str__(self):
        return f"{_operand(self.left)} < {_operand(self.right)}"


@dataclass(frozen=True)
class Not(Expression):
    """Logical negation, zero becomes true and anything else false"""

    operand: Expression

    def __str__(self):
        return f"!{_operand(self.operand)}"


@dataclass(frozen=True)
class Read(Statement):
    """Read an unknown integer from the input into a variable"""

    name: str

    def __str__(self):
        return f"read {self.name}"


@dataclass(frozen=True)
class Write(Statement):
    value: Expression

    def __str__(self):
        return f"write {self.value}"


@dataclass(frozen=True)
class Assign(Statement):
    name: str
    value: Expression

    def __str__(self):
        return f"{self.name} := {self.value}"


@dataclass(frozen=True)
class If(Statement):
    cond: Expression
    then: Statement
    orelse: Statement

    def __str__(self):
        return f"if ({self.cond}) then {{ {self.then} }} else {{ {self.orelse} }}"


@dataclass(frozen=True)
class While(Statement):
    cond: Expression
    body: Statement

    def __str__(self):
        return f"while ({self.cond}) {{ {self.body} }}"


@dataclass(frozen=True)
class Seq(Statement):
    first: Statement
    second: Statement

    def __str__(self):
        return f"{self.first}; {self.second}"


Expr: TypeAlias = Num | Var | Add | Equal | Less | Not
Stmt: TypeAlias = Read | Write | Assign | If | While | Seq
Program: TypeAlias = Stmt


def seq(*stmts: Statement) -> Statement:
    """Chain statements left to right: seq(a, b, c) is Seq(Seq(a, b), c)."""
    if not stmts:
        raise ValueError("Expected at least one statement")
    return reduce(Seq, stmts)
