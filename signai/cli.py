import click
import dataclasses
from contextlib import contextmanager
from typing import IO

import signai.logger as logger
from signai import programs
from signai.abstract_interpreter import AbstractInterpreter, FixpointDivergence
from signai.logger import log
from signai.memory import Memory


@dataclasses.dataclass
class Reporter:
    report: IO
    prefix: str = ""

    @contextmanager
    def context(self, title):
        old = self.prefix
        print(f"{self.prefix[:-1]}┌ {title}", file=self.report)
        self.prefix = f"{self.prefix[:-1]}│ "
        try:
            yield
        finally:
            self.prefix = old
            print(f"{self.prefix[:-1]}└ {title}", file=self.report)

    def output(self, msgs):
        if not isinstance(msgs, str):
            msgs = str(msgs)

        for msg in msgs.splitlines():
            print(f"{self.prefix}{msg}", file=self.report)


def program_parser(ctx_, parms_, name):
    try:
        return name, programs.PROGRAMS[name]
    except KeyError:
        known = ", ".join(programs.PROGRAMS)
        raise click.BadParameter(f"unknown program {name!r}, expected one of: {known}")


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="sets the verbosity of the program, more means more information",
)
@click.pass_context
def cli(ctx, verbose):
    """Sign analysis of small imperative programs."""
    logger.initialize(verbose)
    ctx.obj = verbose


@cli.command("list")
def list_programs():
    """List the sample programs."""
    for name, program in programs.PROGRAMS.items():
        click.echo(f"{name}: {program}")


@cli.command()
@click.argument("NAME", callback=program_parser)
def show(name):
    """Print the program NAME."""
    _, program = name
    click.echo(str(program))


@cli.command()
@click.option(
    "--max-iterations",
    "-N",
    type=click.IntRange(min=1),
    default=None,
    help="give up on a loop after this many evaluations of its body.",
)
@click.option(
    "--trace/--no-trace",
    help="log the memory at every fixpoint iteration.",
)
@click.option(
    "--report",
    "-r",
    default="-",
    type=click.File(mode="w"),
    help="A file to write the result to.",
)
@click.argument("NAME", default=programs.DEFAULT, callback=program_parser)
@click.pass_obj
def analyze(verbose, name, report, trace, max_iterations):
    """Analyze the sample program NAME."""
    name, program = name

    if trace:
        # the trace is logged at INFO
        logger.initialize(max(verbose, 1))

    def observe(iteration: int, m: Memory):
        log.info(f"iteration {iteration}: {m!r}")

    interpreter = AbstractInterpreter(
        observer=observe if trace else None,
        max_iterations=max_iterations,
    )

    r = Reporter(report)
    with r.context(f"Program {name}"):
        r.output(str(program))
    try:
        result = interpreter.analyze(program)
    except FixpointDivergence as e:
        log.error(e)
        raise click.ClickException(str(e)) from e
    with r.context("Memory"):
        r.output(result)


if __name__ == "__main__":
    cli()
