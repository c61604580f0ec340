from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from creature_ranker.classify import fliers, swimmers
from creature_ranker.errors import EmptySubsetFailure
from creature_ranker.models import ClassifiedCreature, Creature, FlyingCreature, SwimmingCreature

TOP_FLIERS = 5


def swim_key(creature: SwimmingCreature) -> float:
    # Ground speed stands in for swim speed when it is the larger of the two.
    return max(creature.swim_speed, creature.speed)


def fly_key(creature: FlyingCreature) -> float:
    return max(creature.fly_speed, creature.speed)


def rank_by_difficulty(creatures: Iterable[Creature]) -> list[Creature]:
    """All creatures, hardest first.

    `sorted` is stable, so creatures with the same challenge rating keep
    their input order.
    """
    return sorted(creatures, key=lambda c: c.challenge_rating, reverse=True)


def quickest_swimmer(candidates: Sequence[SwimmingCreature]) -> SwimmingCreature:
    """Fastest swimmer by `swim_key`. The first one seen wins a tie."""
    if not candidates:
        raise EmptySubsetFailure("swimming")

    best = candidates[0]
    for current in candidates[1:]:
        if swim_key(current) > swim_key(best):
            best = current
    return best


def fastest_fliers(
    candidates: Iterable[FlyingCreature], limit: int = TOP_FLIERS
) -> list[FlyingCreature]:
    return sorted(candidates, key=fly_key, reverse=True)[:limit]


@dataclass(frozen=True)
class Ranking:
    by_difficulty: list[Creature]
    quickest_swimmer: SwimmingCreature
    fastest_fliers: list[FlyingCreature]


def build_ranking(classified: Sequence[ClassifiedCreature]) -> Ranking:
    """Run every derivation; any failure aborts the whole ranking."""
    return Ranking(
        by_difficulty=rank_by_difficulty(c.creature for c in classified),
        quickest_swimmer=quickest_swimmer(swimmers(classified)),
        fastest_fliers=fastest_fliers(fliers(classified)),
    )
