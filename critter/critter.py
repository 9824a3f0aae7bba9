"""
critter_sim module: critter/critter.py

A critter moves along its gait, ages, pays health for every pixel it moves,
eats the food it runs over, and mates once in its life when it is healthy,
of mating age, and touching another critter that can mate too.
"""

from __future__ import annotations
import logging
import random
from typing import TYPE_CHECKING, Optional, Tuple

import config
from config import SimConfig
from critter.movement import MovementSequence, Vec2
from evolution.reproduction import either_parent
from world.physics import Box, heading_degrees, rotated_bounds, wrap_position

if TYPE_CHECKING:
    from world.food import FoodPool
    from world.population import Population

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def random_color() -> Color:
    lo, hi = config.COLOR_RANGE
    return (random.randint(lo, hi), random.randint(lo, hi), random.randint(lo, hi))


class Critter:
    def __init__(
        self,
        cfg: SimConfig,
        position: Vec2,
        movement: MovementSequence,
        color: Color = (255, 255, 255),
        health: float = 0.0,
        age: int = 0,
    ):
        self.cfg = cfg
        self.position = position
        self.movement = movement
        self.color = color
        self.health = health
        self.age = age
        self.mated = False
        self.rotation = 0.0  # degrees, [0, 360); drawing only

    @staticmethod
    def random(cfg: SimConfig) -> "Critter":
        """A critter with a random position, color and gait."""
        return Critter(
            cfg,
            position=(random.randint(0, cfg.width), random.randint(0, cfg.height)),
            movement=MovementSequence.random(),
            color=random_color(),
        )

    @staticmethod
    def from_parents(parent1: "Critter", parent2: "Critter") -> "Critter":
        """
        Offspring of two critters. Position and color are each taken whole from
        one parent; the gait is recombined slot by slot.
        """
        return Critter(
            parent1.cfg,
            position=either_parent(parent1.position, parent2.position),
            movement=MovementSequence.inherit(parent1.movement, parent2.movement),
            color=either_parent(parent1.color, parent2.color),
        )

    def bounds(self) -> Box:
        x, y = self.position
        return rotated_bounds(x, y, config.SPRITE_W, config.SPRITE_H, self.rotation)

    def can_mate(self) -> bool:
        """In mating age (25%..75% of the age limit), healthy enough, and not bred yet."""
        lo, hi = self.cfg.mate_age_range
        return lo <= self.age <= hi and self.health >= self.cfg.mate_health and not self.mated

    def update(self, foods: "FoodPool", population: "Population") -> bool:
        """
        Advance one frame. Returns True if still alive, False if dead.
        """
        movement = self.movement.advance()

        # Age and lose health according to how much it has moved
        self.age += 1
        self.health -= abs(movement[0]) + abs(movement[1])

        if self.age >= self.cfg.age_limit:
            return False

        box = self.bounds()
        if foods.try_consume(box):
            self.health += self.cfg.food_power

        if self.can_mate():
            self._try_mate(box, population)

        old = self.position
        self.position = wrap_position(
            old[0] + movement[0], old[1] + movement[1], self.cfg.width, self.cfg.height
        )
        self.rotation = heading_degrees(old, self.position)
        return True

    def _try_mate(self, box: Box, population: "Population") -> Optional["Critter"]:
        # First touching critter that can mate wins. Both flags are set before
        # the scan of any later critter, so nobody mates twice.
        for other in population.critters:
            if other is self or not other.can_mate():
                continue
            if not box.intersects(other.bounds()):
                continue

            child = Critter.from_parents(self, other)
            population.spawn(child)
            self.mated = True
            other.mated = True
            logger.debug("Critter %x mated with %x", id(self), id(other))
            return child
        return None
