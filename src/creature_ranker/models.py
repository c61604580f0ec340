from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Creature(BaseModel):
    """A creature record admitted from the RPG API.

    Wire keys are camelCase; Python field names are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    armor_class: int = Field(default=0, ge=0, alias="armorClass")
    challenge_rating: float = Field(ge=0, alias="challengeRating")
    hit_points: int = Field(default=0, ge=0, alias="hitPoints")
    initiative: int = 0
    name: str = Field(min_length=1)
    type: str = ""

    # Ground speed. Swim/fly speeds are optional and only meaningful when > 0.
    speed: float = Field(default=0, ge=0)
    swim_speed: float | None = Field(default=None, alias="swimSpeed")
    fly_speed: float | None = Field(default=None, alias="flySpeed")


class SwimmingCreature(Creature):
    swim_speed: float = Field(gt=0, alias="swimSpeed")


class FlyingCreature(Creature):
    fly_speed: float = Field(gt=0, alias="flySpeed")


class Movement(Enum):
    """Movement variant, resolved once when a creature is classified."""

    BASE = "base"
    SWIMMER = "swimmer"
    FLIER = "flier"
    BOTH = "both"

    @property
    def swims(self) -> bool:
        return self in (Movement.SWIMMER, Movement.BOTH)

    @property
    def flies(self) -> bool:
        return self in (Movement.FLIER, Movement.BOTH)


@dataclass(frozen=True)
class ClassifiedCreature:
    creature: Creature
    movement: Movement

    def as_swimmer(self) -> SwimmingCreature:
        if not self.movement.swims:
            raise ValueError(f"{self.creature.name} is not a swimming creature")
        return SwimmingCreature.model_validate(self.creature.model_dump())

    def as_flier(self) -> FlyingCreature:
        if not self.movement.flies:
            raise ValueError(f"{self.creature.name} is not a flying creature")
        return FlyingCreature.model_validate(self.creature.model_dump())
