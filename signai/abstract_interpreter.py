from dataclasses import dataclass
from itertools import count
from typing import Callable, Optional

from loguru import logger

from signai.abstractions.sign_abstraction import Sign, TOP
from signai.memory import Memory
from signai.syntax import (
    Add,
    Assign,
    Equal,
    Expr,
    If,
    Less,
    Not,
    Num,
    Program,
    Read,
    Seq,
    Stmt,
    Var,
    While,
    Write,
)

Transformer = Callable[[Memory], Memory]
Refiner = Callable[[Expr, Memory], Memory]
Observer = Callable[[int, Memory], None]


class FixpointDivergence(RuntimeError):
    """Raised when a fixpoint is not reached within the allowed iterations."""

    def __init__(self, iterations: int, memory: Memory):
        super().__init__(f"No fixpoint after {iterations} iterations, last memory: {memory!r}")
        self.iterations = iterations
        self.memory = memory


def eval_expr(e: Expr, m: Memory) -> Sign:
    match e:
        case Num(n):
            return Sign.abstraction(n)
        case Var(x):
            return m.lookup(x)
        case Add(e1, e2):
            return eval_expr(e1, m).add(eval_expr(e2, m))
        case Equal(e1, e2):
            return eval_expr(e1, m).equal(eval_expr(e2, m))
        case Less(e1, e2):
            return eval_expr(e1, m).less(eval_expr(e2, m))
        case Not(e1):
            return eval_expr(e1, m).logical_not()
        case _:
            raise NotImplementedError(f"Unhandled expression {e!r}")


def refine(cond: Expr, m: Memory) -> Memory:
    """
    Restrict m to the states where cond holds.

    The identity is a sound answer and the one given here; every precision
    gain for branches and loop exits has to come from a better refiner.
    """
    return m


def fixpoint(
    f: Transformer,
    m0: Memory,
    observer: Optional[Observer] = None,
    max_iterations: Optional[int] = None,
) -> Memory:
    """
    Iterate f from m0 until f adds nothing, i.e. f(m) <= m, and return m.

    Iterates are accumulated with join, so the sequence is ascending and
    stops on any finite-height lattice. max_iterations bounds the number
    of applications of f.
    """
    m = m0
    for iteration in count():
        if observer is not None:
            observer(iteration, m)
        logger.debug(f"Fixpoint iteration {iteration}: {m!r}")

        if max_iterations is not None and iteration >= max_iterations:
            raise FixpointDivergence(iteration, m)

        m_next = f(m)
        if m_next <= m:
            logger.debug(f"Fixpoint reached after {iteration + 1} applications")
            return m
        m = m | m_next


@dataclass
class AbstractInterpreter:
    """
    Sign analysis of a whole program, threading a single memory through
    every statement.
    """

    refine: Refiner = refine
    observer: Optional[Observer] = None
    max_iterations: Optional[int] = None

    def run(self, s: Stmt, m: Memory) -> Memory:
        match s:
            case Read(x):
                # an input can be anything
                return m.bind(x, TOP)
            case Write(_):
                return m
            case Assign(x, e):
                return m.bind(x, eval_expr(e, m))
            case If(cond, s1, s2):
                m1 = self.run(s1, self.refine(cond, m))
                m2 = self.run(s2, self.refine(Not(cond), m))
                return m1 | m2
            case While(cond, body):
                inv = fixpoint(
                    lambda mem: self.run(body, mem),
                    self.refine(cond, m),
                    observer=self.observer,
                    max_iterations=self.max_iterations,
                )
                return self.refine(Not(cond), inv)
            case Seq(s1, s2):
                return self.run(s2, self.run(s1, m))
            case _:
                raise NotImplementedError(f"Unhandled statement {s!r}")

    def analyze(self, program: Program) -> Memory:
        logger.debug(f"Starting sign analysis of: {program}")
        result = self.run(program, Memory.bottom())
        logger.debug(f"Analysis result: {result!r}")
        return result


def analyze(
    program: Program,
    *,
    observer: Optional[Observer] = None,
    max_iterations: Optional[int] = None,
    refine: Refiner = refine,
) -> Memory:
    """Run the sign analysis on program, starting from the empty memory."""
    return AbstractInterpreter(refine, observer, max_iterations).analyze(program)
