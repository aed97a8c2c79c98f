"""Monte Carlo driver — runs many random duels and tallies the outcomes."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from balance_sim.engine.combat import DEFAULT_MAX_TURNS, run_combat
from balance_sim.mechanics.character_creation import create_character
from balance_sim.models.character import Character, CharacterClass, Race
from balance_sim.models.combat import CombatOutcome

logger = logging.getLogger(__name__)

GROUP_KEYS = ("class", "race")
DURATION_BUCKET = 5


@dataclass
class Tally:
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.wins / self.total


@dataclass
class SimulationReport:
    group_by: str
    trials: int
    tallies: dict[str, Tally] = field(default_factory=dict)

    def rows(self) -> list[tuple[str, Tally]]:
        """Tallies sorted by win rate, best first."""
        return sorted(self.tallies.items(), key=lambda item: item[1].win_rate, reverse=True)


@dataclass
class DurationStats:
    count: int = 0
    total_turns: int = 0
    min_turns: int = 0
    max_turns: int = 0
    buckets: dict[int, int] = field(default_factory=dict)

    @property
    def average(self) -> float:
        if self.count == 0:
            return 0.0
        return self.total_turns / self.count

    def share(self, bucket: int) -> float:
        if self.count == 0:
            return 0.0
        return self.buckets.get(bucket, 0) / self.count


def seed_rng(seed: int | None) -> None:
    """Seed the shared generator. ``None`` leaves it untouched."""
    if seed is not None:
        random.seed(seed)


def random_character() -> Character:
    return create_character(random.choice(list(Race)), random.choice(list(CharacterClass)))


def _group_labels(group_by: str) -> list[str]:
    if group_by == "class":
        return [c.value for c in CharacterClass]
    if group_by == "race":
        return [r.value for r in Race]
    raise ValueError(f"group_by must be one of {GROUP_KEYS}, got {group_by!r}")


def _group_key(character: Character, group_by: str) -> str:
    return character.char_class.value if group_by == "class" else character.race.value


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError(f"Trial count must be positive, got {count}")


def record(tallies: dict[str, Tally], key1: str, key2: str, outcome: CombatOutcome) -> None:
    """Credit one duel to both sides. Mirror matches count twice."""
    if outcome is CombatOutcome.CHAR1:
        tallies[key1].wins += 1
        tallies[key2].losses += 1
    elif outcome is CombatOutcome.CHAR2:
        tallies[key2].wins += 1
        tallies[key1].losses += 1
    else:
        tallies[key1].draws += 1
        tallies[key2].draws += 1


def run_simulations(
    count: int = 1000,
    max_turns: int = DEFAULT_MAX_TURNS,
    group_by: str = "class",
) -> SimulationReport:
    """Fight ``count`` duels between random characters, tallied by class or race."""
    _check_count(count)
    labels = _group_labels(group_by)
    report = SimulationReport(group_by=group_by, trials=count, tallies={label: Tally() for label in labels})
    logger.info("Running %d duels grouped by %s", count, group_by)

    for _ in range(count):
        char1 = random_character()
        char2 = random_character()
        outcome = run_combat(char1, char2, max_turns).winner
        record(report.tallies, _group_key(char1, group_by), _group_key(char2, group_by), outcome)

    logger.info("Finished %d duels", count)
    return report


def analyze_durations(count: int = 1000, max_turns: int = DEFAULT_MAX_TURNS) -> DurationStats:
    """Collect how many turns random duels last, in 5-turn buckets."""
    _check_count(count)
    stats = DurationStats()
    logger.info("Measuring the length of %d duels", count)

    for _ in range(count):
        turns = run_combat(random_character(), random_character(), max_turns).turns
        if stats.count == 0:
            stats.min_turns = stats.max_turns = turns
        else:
            stats.min_turns = min(stats.min_turns, turns)
            stats.max_turns = max(stats.max_turns, turns)
        stats.count += 1
        stats.total_turns += turns
        bucket = turns // DURATION_BUCKET * DURATION_BUCKET
        stats.buckets[bucket] = stats.buckets.get(bucket, 0) + 1

    stats.buckets = dict(sorted(stats.buckets.items()))
    return stats


def run_matchup(
    race1: Race | str,
    class1: CharacterClass | str,
    race2: Race | str,
    class2: CharacterClass | str,
    count: int = 1000,
    max_turns: int = DEFAULT_MAX_TURNS,
) -> Tally:
    """Repeat one archetype pairing with fresh stats each time.

    The tally is from the first character's point of view.
    """
    _check_count(count)
    tally = Tally()
    for _ in range(count):
        outcome = run_combat(create_character(race1, class1), create_character(race2, class2), max_turns).winner
        if outcome is CombatOutcome.CHAR1:
            tally.wins += 1
        elif outcome is CombatOutcome.CHAR2:
            tally.losses += 1
        else:
            tally.draws += 1
    return tally
