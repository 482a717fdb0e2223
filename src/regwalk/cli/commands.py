"""CLI commands for regwalk."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from regwalk.automaton import Automaton, load_automaton
from regwalk.config import WalkSettings, load_settings
from regwalk.errors import ValidationError, WalkError
from regwalk.generation import RandomWalker

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def generate_one(walker: RandomWalker, settings: WalkSettings) -> str:
    """Generate one string, retrying failed bounded walks.

    Unconstrained walks cannot fail. Bounded walks are retried up to
    ``settings.max_attempts`` times; the last WalkError is re-raised.
    """
    if not settings.bounded:
        return walker.generate()

    last_error: WalkError | None = None
    for attempt in range(1, settings.max_attempts + 1):
        try:
            return walker.generate(settings.min_length, settings.max_length)
        except WalkError as e:
            logger.debug("Attempt %d/%d failed: %s", attempt, settings.max_attempts, e)
            last_error = e

    assert last_error is not None
    raise last_error


def _escape_surrogates(value: str) -> str:
    """Replace lone surrogates, which UTF-8 cannot encode, with ``\\udxxx`` escapes."""
    return value.encode("utf-8", "backslashreplace").decode("utf-8")


def _format_code(code: int) -> str:
    char = chr(code)
    if char.isprintable() and not char.isspace():
        return char
    return f"\\u{code:04x}" if code <= 0xFFFF else f"\\U{code:08x}"


def _format_range(low: int, high: int) -> str:
    if low == high:
        return _format_code(low)
    return f"{_format_code(low)}-{_format_code(high)}"


def build_table(automaton: Automaton) -> Table:
    """Render states and their ordered transitions as a table."""
    table = Table(title=f"{automaton.state_count} states, {automaton.transition_count} transitions")
    table.add_column("State", justify="right")
    table.add_column("Accept")
    table.add_column("Range")
    table.add_column("To", justify="right")

    initial = automaton.initial_state()
    for state in automaton.iter_states():
        label = f"{state.id}*" if state == initial else str(state.id)
        accept = "yes" if state.is_accept else ""
        transitions = state.ordered_transitions()
        if not transitions:
            table.add_row(label, accept, "-", "-")
            continue
        for index, transition in enumerate(transitions):
            table.add_row(
                label if index == 0 else "",
                accept if index == 0 else "",
                _format_range(transition.min, transition.max),
                str(transition.destination.id),
            )
    return table


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """regwalk - Generate strings accepted by a finite automaton."""
    ctx.ensure_object(dict)

    try:
        settings = load_settings(config)
    except ValidationError as e:
        click.echo(e.format_verbose(), err=True)
        sys.exit(1)

    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose or settings.verbose

    setup_logging(ctx.obj["verbose"])


@cli.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
@click.option("--count", "-n", type=int, default=None, help="Number of strings to generate")
@click.option("--min-length", type=int, default=None, help="Minimum string length")
@click.option("--max-length", type=int, default=None, help="Maximum string length")
@click.option("--seed", "-s", type=int, default=None, help="Seed for reproducible output")
@click.option("--max-attempts", type=int, default=None, help="Walks tried per bounded string")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_context
def generate(
    ctx: click.Context,
    definition: str,
    count: int | None,
    min_length: int | None,
    max_length: int | None,
    seed: int | None,
    max_attempts: int | None,
    output_format: str,
) -> None:
    """Generate strings accepted by the automaton in DEFINITION.

    DEFINITION is a YAML or JSON automaton definition file. Pass both
    --min-length and --max-length for length-bounded generation.
    """
    try:
        settings = load_settings(
            ctx.obj["config_path"],
            count=count,
            min_length=min_length,
            max_length=max_length,
            seed=seed,
            max_attempts=max_attempts,
        )
        automaton = load_automaton(definition)
    except ValidationError as e:
        click.echo(e.format_verbose(), err=True)
        sys.exit(1)

    walker = RandomWalker.from_seed(automaton, settings.seed)
    strings: list[str] = []
    failures: list[dict[str, Any]] = []

    for _ in range(settings.count):
        try:
            strings.append(generate_one(walker, settings))
        except WalkError as e:
            failures.append(e.to_dict())
            if output_format == "text":
                click.echo(f"✗ {e}", err=True)

    if output_format == "json":
        click.echo(
            json.dumps(
                {"seed": settings.seed, "strings": strings, "failures": failures},
                indent=2,
                default=str,
            )
        )
    else:
        for value in strings:
            click.echo(_escape_surrogates(value))

    sys.exit(1 if failures else 0)


@cli.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
def inspect(definition: str) -> None:
    """Show the states and ordered transitions of DEFINITION."""
    try:
        automaton = load_automaton(definition)
    except ValidationError as e:
        click.echo(e.format_verbose(), err=True)
        sys.exit(1)

    console = Console()
    console.print(build_table(automaton))
