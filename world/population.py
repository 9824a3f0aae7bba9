"""
critter_sim module: world/population.py

Owns the live critters and the food pool, and runs one frame at a time:
- every critter alive at frame start is updated once, in a fixed order
- critters born during the frame are staged and join at the end of it
  (they are first updated on the next frame)
- critters that died during the frame are removed at the end of it
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from config import SimConfig
from critter.critter import Critter
from world.food import FoodPool


@dataclass
class FrameStats:
    born: int = 0
    died: int = 0


class Population:
    def __init__(
        self,
        cfg: SimConfig,
        critters: Optional[List[Critter]] = None,
        foods: Optional[FoodPool] = None,
    ):
        self.cfg = cfg
        self.critters: List[Critter] = list(critters) if critters is not None else []
        self.foods = foods if foods is not None else FoodPool(cfg.foods, cfg.width, cfg.height)

        self.frame = 0
        self.births = 0
        self.deaths = 0
        self._newborn: List[Critter] = []

    @staticmethod
    def random(cfg: SimConfig) -> "Population":
        return Population(cfg, critters=[Critter.random(cfg) for _ in range(cfg.critters)])

    def __len__(self) -> int:
        return len(self.critters)

    def spawn(self, child: Critter) -> None:
        """Stage a newborn critter; it joins the population at the end of the frame."""
        self._newborn.append(child)

    def update(self) -> FrameStats:
        dead: List[Critter] = []
        for critter in list(self.critters):
            if not critter.update(self.foods, self):
                dead.append(critter)

        if dead:
            dead_ids = {id(c) for c in dead}
            self.critters = [c for c in self.critters if id(c) not in dead_ids]

        newborn, self._newborn = self._newborn, []
        self.critters.extend(newborn)

        self.frame += 1
        self.births += len(newborn)
        self.deaths += len(dead)
        return FrameStats(born=len(newborn), died=len(dead))

    def avg_health(self) -> float:
        if not self.critters:
            return 0.0
        return sum(c.health for c in self.critters) / len(self.critters)

    def stats(self) -> dict:
        return {
            "population": len(self.critters),
            "births": self.births,
            "deaths": self.deaths,
            "avg_health": self.avg_health(),
            "frame": self.frame,
        }
