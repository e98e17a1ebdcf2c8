#!/usr/bin/env python3
"""
CLI for the Super Over outcome engine
"""
import functools
import json
import logging
from collections import Counter

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import track
from rich.table import Table

from superover.config import get_settings
from superover.container import SAMPLE_INPUTS, ServiceContainer
from superover.engine.super_over import BowlingMode, TargetMode
from superover.errors import CricketError
from superover.models.cricket import BowlingType, ShotTiming, ShotType
from superover.models.schemas import SuperOverResponse, prediction_response
from superover.rules.outcome_rules import OUTCOME_RULES, rule_statistics, rules_for_bowling_type
from superover.rules.realism_rules import REALISM_OVERRIDES

console = Console()


def handle_errors(f):
    """Print engine errors in red and exit non-zero"""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except CricketError as e:
            console.print(f"[red]{type(e).__name__}: {escape(e.message)}[/red]", highlight=False)
            raise click.exceptions.Exit(1)
    return wrapper


def _read_lines(lines, file) -> list[str]:
    if lines:
        return list(lines)
    if file.isatty():
        raise click.UsageError("Provide input lines as arguments, with --file, or on stdin")
    return file.read().splitlines()


@click.group()
@click.option("--strategy", default=None, help="Outcome strategy (rule-based, probabilistic)")
@click.option("--seed", type=int, default=None, help="Seed for random draws")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.pass_context
@handle_errors
def cli(ctx, strategy, seed, verbose):
    """Super Over - cricket outcome prediction and simulation"""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj.update(settings=settings, strategy=strategy, seed=seed)


def _container(ctx, **overrides) -> ServiceContainer:
    """Container from the loaded settings; unset options fall back to them"""
    options = {"strategy": ctx.obj["strategy"], "seed": ctx.obj["seed"], **overrides}
    return ServiceContainer(ctx.obj["settings"], **{k: v for k, v in options.items() if v is not None})


@cli.command()
@click.argument("lines", nargs=-1)
@click.option("--file", "-f", type=click.File("r"), default="-", help="Read deliveries from a file (default: stdin)")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
@handle_errors
def predict(ctx, lines, file, as_json):
    """Predict outcomes for '<bowling> <shot> <timing>' lines"""
    container = _container(ctx)
    inputs = container.input_parser.parse_lines(_read_lines(lines, file))
    outcomes = container.predictor.predict_all(inputs)

    if as_json:
        payload = [prediction_response(i, o).model_dump() for i, o in zip(inputs, outcomes)]
        click.echo(json.dumps(payload, indent=2))
        return

    for line in container.outcome_formatter.format_multiple(outcomes):
        console.print(line, highlight=False)


@cli.command()
@click.argument("lines", nargs=-1)
@click.option("--file", "-f", type=click.File("r"), default="-", help="Read deliveries from a file (default: stdin)")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
@handle_errors
def commentary(ctx, lines, file, as_json):
    """Outcomes with commentary for '<bowling> <shot> <timing>' lines"""
    container = _container(ctx)
    inputs = container.input_parser.parse_lines(_read_lines(lines, file))
    results = container.commentary_service.commentate_all(inputs)

    if as_json:
        payload = [prediction_response(i, o, c).model_dump() for i, (c, o) in zip(inputs, results)]
        click.echo(json.dumps(payload, indent=2))
        return

    for line in container.commentary_formatter.format_multiple(results):
        console.print(line, highlight=False)


@cli.command("super-over")
@click.argument("lines", nargs=-1)
@click.option("--file", "-f", type=click.File("r"), default="-", help="Read six '<shot> <timing>' lines from a file (default: stdin)")
@click.option("--bowling-mode", type=click.Choice([m.value for m in BowlingMode]), default=None)
@click.option("--target-mode", type=click.Choice([m.value for m in TargetMode]), default=None)
@click.option("--target", type=int, default=None, help="Fixed target runs")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
@handle_errors
def super_over(ctx, lines, file, bowling_mode, target_mode, target, as_json):
    """Simulate a Super Over from six '<shot> <timing>' lines"""
    container = _container(
        ctx,
        bowling_mode=bowling_mode,
        target_mode=target_mode,
        target_runs=target,
    )
    result = container.simulate_lines(_read_lines(lines, file))

    if as_json:
        click.echo(SuperOverResponse.from_result(result).model_dump_json(indent=2))
        return

    console.print(container.super_over_formatter.format(result), highlight=False)
    for note in result.notes:
        console.print(f"[yellow]{note}[/yellow]", highlight=False)


@cli.command()
@click.pass_context
@handle_errors
def strategies(ctx):
    """List outcome strategies"""
    container = _container(ctx)

    table = Table(title="Outcome Strategies")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Active", justify="center", style="green")

    for strategy_id in container.list_strategies():
        info = container.strategy_info(strategy_id)
        active = "*" if strategy_id == container.current_strategy_id else ""
        table.add_row(strategy_id, info["name"], info["description"], active)

    console.print(table)


@cli.command()
@click.option("--bowling", default=None, help="Only show rules for this bowling type")
@handle_errors
def rules(bowling):
    """Show the outcome rule table and realism overrides"""
    bowling_type = BowlingType.from_name(bowling) if bowling else None
    selected = rules_for_bowling_type(bowling_type) if bowling_type else OUTCOME_RULES

    table = Table(title=f"Outcome Rules ({len(selected)})")
    table.add_column("Bowling", style="magenta")
    table.add_column("Shot", style="cyan")
    for timing in ShotTiming:
        table.add_column(timing.value, justify="right")

    for rule in selected:
        table.add_row(
            rule.bowling_type.value,
            rule.shot_type.value,
            *[rule.outcome_for(t).value for t in ShotTiming],
        )
    console.print(table)

    overrides = Table(title="Realism Overrides (all timings)")
    overrides.add_column("Bowling", style="magenta")
    overrides.add_column("Shot", style="cyan")
    overrides.add_column("Outcome", style="yellow")
    overrides.add_column("Reason")
    for o in REALISM_OVERRIDES:
        if bowling_type and o.bowling_type is not bowling_type:
            continue
        overrides.add_row(o.bowling_type.value, o.shot_type.value, o.forced_outcome.value, o.reason)
    console.print(overrides)

    stats = rule_statistics()
    console.print(
        f"[bold]{stats['total_rules']}[/bold] rules covering "
        f"{stats['bowling_type_count']} bowling types and {stats['shot_type_count']} shot types"
    )


@cli.command()
def samples():
    """Print sample inputs for each command"""
    for command, lines in SAMPLE_INPUTS.items():
        console.print(Panel("\n".join(lines), title=command))
    console.print(f"Bowling types: {', '.join(BowlingType.names())}", highlight=False)
    console.print(f"Shot types: {', '.join(ShotType.names())}", highlight=False)
    console.print(f"Timings: {', '.join(ShotTiming.names())}", highlight=False)


@cli.command()
@click.option("--runs", default=500, type=click.IntRange(min=1), help="Number of Super Overs to simulate")
@click.option("--bowling-mode", type=click.Choice([m.value for m in BowlingMode]), default="shuffled")
@click.option("--target-mode", type=click.Choice([m.value for m in TargetMode]), default="random")
@click.pass_context
@handle_errors
def benchmark(ctx, runs, bowling_mode, target_mode):
    """Simulate many Super Overs with random shot calls"""
    container = _container(ctx, bowling_mode=bowling_mode, target_mode=target_mode)
    rng = container.rng
    shots = list(ShotType)
    timings = list(ShotTiming)

    verdicts = Counter()
    scores = []
    balls = []
    for _ in track(range(runs), description="Simulating..."):
        calls = [(rng.choice(shots), rng.choice(timings)) for _ in range(6)]
        result = container.simulator.simulate(calls)
        verdicts[result.match_result.value] += 1
        scores.append(result.scored_runs)
        balls.append(result.balls_played)

    console.print(Panel("[bold]Super Over Statistics[/bold]"))
    console.print(f"[cyan]Strategy:[/cyan] {container.current_strategy_id}")
    console.print(f"[cyan]Win %:[/cyan] {verdicts['won'] / runs * 100:.1f}%")
    console.print(f"[cyan]Average Score:[/cyan] {sum(scores) / runs:.1f}")
    console.print(f"[cyan]Min / Max Score:[/cyan] {min(scores)} / {max(scores)}")
    console.print(f"[cyan]Average Balls Played:[/cyan] {sum(balls) / runs:.2f}")


if __name__ == "__main__":
    cli()
