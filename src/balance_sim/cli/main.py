"""Typer CLI application."""
from __future__ import annotations

from typing import NoReturn, Optional

import typer

from balance_sim.config import SimulationConfig, get_simulation_config
from balance_sim.logging_setup import setup_logging

app = typer.Typer(
    name="balance-sim",
    help="Monte Carlo balance testing for class and race matchups",
    no_args_is_help=True,
)

TRIALS_OPTION = typer.Option(None, "--trials", "-t", help="Number of duels to simulate")
MAX_TURNS_OPTION = typer.Option(None, "--max-turns", help="Turn limit before a duel is a draw")
SEED_OPTION = typer.Option(None, "--seed", help="Seed the RNG for a reproducible run")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log every action")


def _prepare(
    trials: Optional[int],
    max_turns: Optional[int],
    seed: Optional[int],
    verbose: bool,
) -> SimulationConfig:
    """Merge CLI overrides into the config file values and set up logging/RNG."""
    from balance_sim.engine.simulation import seed_rng

    config = get_simulation_config()
    overrides = {
        key: value
        for key, value in (("trials", trials), ("max_turns", max_turns), ("seed", seed))
        if value is not None
    }
    if overrides:
        config = SimulationConfig(**{**config.model_dump(), **overrides})

    setup_logging("DEBUG" if verbose else config.log_level.upper())
    seed_rng(config.seed)
    return config


def _fail(message: str) -> NoReturn:
    from balance_sim.cli.display import Display

    Display().show_error(message)
    raise typer.Exit(code=2)


def _grouped_run(group_by: str, trials, max_turns, seed, verbose) -> None:
    from balance_sim.cli.display import Display
    from balance_sim.engine.simulation import run_simulations

    try:
        config = _prepare(trials, max_turns, seed, verbose)
        report = run_simulations(config.trials, config.max_turns, group_by=group_by)
    except ValueError as exc:
        _fail(str(exc))
    Display().show_report(report)


@app.command()
def classes(
    trials: Optional[int] = TRIALS_OPTION,
    max_turns: Optional[int] = MAX_TURNS_OPTION,
    seed: Optional[int] = SEED_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Win/loss/draw table per class."""
    _grouped_run("class", trials, max_turns, seed, verbose)


@app.command()
def races(
    trials: Optional[int] = TRIALS_OPTION,
    max_turns: Optional[int] = MAX_TURNS_OPTION,
    seed: Optional[int] = SEED_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Win/loss/draw table per race."""
    _grouped_run("race", trials, max_turns, seed, verbose)


@app.command()
def durations(
    trials: Optional[int] = TRIALS_OPTION,
    max_turns: Optional[int] = MAX_TURNS_OPTION,
    seed: Optional[int] = SEED_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """How many turns duels last."""
    from balance_sim.cli.display import Display
    from balance_sim.engine.simulation import analyze_durations

    try:
        config = _prepare(trials, max_turns, seed, verbose)
        stats = analyze_durations(config.trials, config.max_turns)
    except ValueError as exc:
        _fail(str(exc))
    Display().show_durations(stats)


@app.command()
def duel(
    race1: str = typer.Argument(..., help="Race of the first character"),
    class1: str = typer.Argument(..., help="Class of the first character"),
    race2: str = typer.Argument(..., help="Race of the second character"),
    class2: str = typer.Argument(..., help="Class of the second character"),
    trials: Optional[int] = TRIALS_OPTION,
    max_turns: Optional[int] = MAX_TURNS_OPTION,
    seed: Optional[int] = SEED_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Pit one race/class pairing against another."""
    from balance_sim.cli.display import Display
    from balance_sim.engine.simulation import run_matchup
    from balance_sim.models.character import CharacterClass, Race

    try:
        first = (Race(race1), CharacterClass(class1))
        second = (Race(race2), CharacterClass(class2))
        config = _prepare(trials, max_turns, seed, verbose)
        tally = run_matchup(*first, *second, count=config.trials, max_turns=config.max_turns)
    except ValueError as exc:
        _fail(str(exc))
    Display().show_matchup(
        f"{first[0].value} {first[1].value}",
        f"{second[0].value} {second[1].value}",
        tally,
    )


if __name__ == "__main__":
    app()
