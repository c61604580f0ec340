from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from creature_ranker.errors import PayloadShapeFailure
from creature_ranker.models import (
    ClassifiedCreature,
    Creature,
    FlyingCreature,
    Movement,
    SwimmingCreature,
)

logger = logging.getLogger(__name__)

_CREATURE_LIST = TypeAdapter(list[Creature])


def is_creature(record: Any) -> bool:
    """A raw record is a creature iff it carries a challenge rating.

    Anything else (other shapes, non-mappings) is simply not a creature.
    """
    if not isinstance(record, Mapping):
        return False
    return "challengeRating" in record


def is_swimming_creature(creature: Any) -> bool:
    swim_speed = getattr(creature, "swim_speed", None)
    return swim_speed is not None and swim_speed > 0


def is_flying_creature(creature: Any) -> bool:
    fly_speed = getattr(creature, "fly_speed", None)
    return fly_speed is not None and fly_speed > 0


def movement_of(creature: Creature) -> Movement:
    swims = is_swimming_creature(creature)
    flies = is_flying_creature(creature)
    if swims and flies:
        return Movement.BOTH
    if swims:
        return Movement.SWIMMER
    if flies:
        return Movement.FLIER
    return Movement.BASE


def admit(records: Sequence[Any]) -> list[Creature]:
    """Keep the records that pass `is_creature` and validate them as one collection.

    Rejected records are dropped silently. An admitted record that does not
    validate fails the whole collection.
    """
    admitted = [r for r in records if is_creature(r)]
    dropped = len(records) - len(admitted)
    if dropped:
        logger.debug("Dropped %d record(s) without a challenge rating", dropped)

    try:
        return _CREATURE_LIST.validate_python(admitted)
    except ValidationError as e:
        raise PayloadShapeFailure(f"{e.error_count()} invalid creature field(s).") from e


def classify(creatures: Iterable[Creature]) -> list[ClassifiedCreature]:
    return [ClassifiedCreature(creature=c, movement=movement_of(c)) for c in creatures]


def swimmers(classified: Iterable[ClassifiedCreature]) -> list[SwimmingCreature]:
    return [c.as_swimmer() for c in classified if c.movement.swims]


def fliers(classified: Iterable[ClassifiedCreature]) -> list[FlyingCreature]:
    return [c.as_flier() for c in classified if c.movement.flies]
