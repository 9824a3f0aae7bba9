"""
critter_sim module: world/food.py

Food pool:
- Fixed number of food points scattered uniformly over the world
- A critter eats at most one food per frame
- Every eaten food is immediately replaced by a new random one, so the pool never shrinks
"""

from __future__ import annotations
from dataclasses import dataclass
import random
from typing import Iterator, List

from world.physics import Box


@dataclass
class Food:
    x: float
    y: float

    @staticmethod
    def random(w: int, h: int) -> "Food":
        return Food(x=random.randint(0, w), y=random.randint(0, h))


class FoodPool:
    def __init__(self, capacity: int, w: int, h: int):
        self.w = w
        self.h = h
        self.points: List[Food] = [Food.random(w, h) for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Food]:
        return iter(self.points)

    def try_consume(self, box: Box) -> bool:
        """
        Eat the first food (storage order) inside ``box``.
        The eaten food is removed and a new one is randomly placed.
        Returns True if something was eaten.
        """
        for i, food in enumerate(self.points):
            if box.contains(food.x, food.y):
                del self.points[i]
                self.points.append(Food.random(self.w, self.h))
                return True
        return False
