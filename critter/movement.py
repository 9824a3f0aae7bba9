"""
critter_sim module: critter/movement.py

Critter gait:
- MovementPattern is one randomized trigonometric motion segment with a finite length
- MovementSequence chains NUM_MOVEMENTS patterns and cycles through them forever
- Offspring inherit their sequence slot by slot from either parent
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
import math
import random
from typing import List, Optional, Tuple

import config
from evolution.reproduction import either_parent

Vec2 = Tuple[float, float]


@dataclass
class MovementPattern:
    """
    speed:       steady movement along each axis
    radius:      oscillation amplitude (cos on x, sin on y)
    tick_speed:  phase increment per frame
    tick:        running phase
    length:      how many frames the pattern lasts
    counter:     countdown, set by start()
    """
    speed: Vec2 = (0.0, 0.0)
    radius: Vec2 = (0.0, 0.0)
    tick_speed: Vec2 = (0.0, 0.0)
    tick: Vec2 = (0.0, 0.0)
    length: int = 0
    counter: int = 0

    @staticmethod
    def random() -> "MovementPattern":
        return MovementPattern(
            speed=(random.gauss(0.0, config.SPEED_SIGMA), random.gauss(0.0, config.SPEED_SIGMA)),
            radius=(random.gauss(0.0, config.RADIUS_SIGMA), random.gauss(0.0, config.RADIUS_SIGMA)),
            tick_speed=(
                random.gauss(0.0, config.TICK_SPEED_SIGMA),
                random.gauss(0.0, config.TICK_SPEED_SIGMA),
            ),
            length=random.randrange(*config.LENGTH_RANGE),
        )

    def start(self) -> None:
        self.counter = self.length

    def advance(self) -> Optional[Vec2]:
        """
        One frame of movement. Returns None once the countdown is used up,
        i.e. after exactly ``length`` displacements since start().
        """
        if self.counter <= 0:
            return None
        self.counter -= 1

        self.tick = (self.tick[0] + self.tick_speed[0], self.tick[1] + self.tick_speed[1])

        dx = self.speed[0] + math.cos(self.tick[0]) * self.radius[0]
        dy = self.speed[1] + math.sin(self.tick[1]) * self.radius[1]
        return dx, dy

    def clone(self) -> "MovementPattern":
        return replace(self)


@dataclass
class MovementSequence:
    patterns: List[MovementPattern] = field(default_factory=list)
    current: int = 0

    @staticmethod
    def random(n: int = config.NUM_MOVEMENTS) -> "MovementSequence":
        seq = MovementSequence(patterns=[MovementPattern.random() for _ in range(n)])
        seq.patterns[seq.current].start()
        return seq

    @staticmethod
    def inherit(a: "MovementSequence", b: "MovementSequence") -> "MovementSequence":
        """
        Genetic recombination: slot k is copied from ``a`` or ``b`` with even
        odds, independently per slot.
        """
        patterns = [either_parent(pa, pb).clone() for pa, pb in zip(a.patterns, b.patterns)]
        seq = MovementSequence(patterns=patterns)
        seq.patterns[seq.current].start()
        return seq

    def advance(self) -> Vec2:
        movement = self.patterns[self.current].advance()

        # Step to the next pattern if the current one is exhausted
        if movement is None:
            self.current = (self.current + 1) % len(self.patterns)
            pattern = self.patterns[self.current]
            pattern.start()
            movement = pattern.advance()
            if movement is None:
                # zero-length pattern
                movement = (0.0, 0.0)
        return movement
