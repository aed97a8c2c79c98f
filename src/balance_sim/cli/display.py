"""Rich terminal output for simulation results."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from balance_sim.engine.simulation import DURATION_BUCKET, DurationStats, SimulationReport, Tally

console = Console()

BAR_CHAR = "█"
BAR_SCALE = 20


def _rate_color(rate: float) -> str:
    if rate >= 0.55:
        return "red"
    if rate <= 0.45:
        return "cyan"
    return "green"


class Display:
    def __init__(self) -> None:
        self.console = console

    def show_report(self, report: SimulationReport) -> None:
        heading = "Class" if report.group_by == "class" else "Race"
        table = Table(
            title=f"Results by {report.group_by} ({report.trials} duels)",
            box=box.SIMPLE_HEAVY,
        )
        table.add_column(heading, style="bold")
        table.add_column("Wins", justify="right")
        table.add_column("Losses", justify="right")
        table.add_column("Draws", justify="right")
        table.add_column("Win rate", justify="right")

        for label, tally in report.rows():
            color = _rate_color(tally.win_rate)
            table.add_row(
                label,
                str(tally.wins),
                str(tally.losses),
                str(tally.draws),
                f"[{color}]{tally.win_rate * 100:.1f}%[/{color}]",
            )
        self.console.print(table)

    def show_durations(self, stats: DurationStats) -> None:
        self.console.print(Panel(
            f"Average: [bold]{stats.average:.1f}[/bold] turns\n"
            f"Min: {stats.min_turns} turns | Max: {stats.max_turns} turns",
            title=f"Duel length ({stats.count} duels)",
            border_style="cyan",
            box=box.ROUNDED,
        ))

        table = Table(box=box.SIMPLE)
        table.add_column("Turns", justify="right")
        table.add_column("Distribution")
        table.add_column("Duels", justify="right")
        table.add_column("Share", justify="right")
        for bucket, hits in stats.buckets.items():
            table.add_row(
                f"{bucket}-{bucket + DURATION_BUCKET - 1}",
                f"[magenta]{BAR_CHAR * (hits // BAR_SCALE)}[/magenta]",
                str(hits),
                f"{stats.share(bucket) * 100:.1f}%",
            )
        self.console.print(table)

    def show_matchup(self, first: str, second: str, tally: Tally) -> None:
        color = _rate_color(tally.win_rate)
        self.console.print(Panel(
            f"[bold]{first}[/bold] vs [bold]{second}[/bold]\n\n"
            f"Wins: {tally.wins}  Losses: {tally.losses}  Draws: {tally.draws}\n"
            f"Win rate: [{color}]{tally.win_rate * 100:.1f}%[/{color}]",
            title=f"Matchup ({tally.total} duels)",
            border_style="yellow",
            box=box.ROUNDED,
        ))

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {message}")
