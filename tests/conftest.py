"""Pytest configuration and fixtures for critter_sim tests."""

from __future__ import annotations

import random

import pytest

from config import SimConfig
from critter.critter import Critter
from critter.movement import MovementPattern, MovementSequence
from world.food import FoodPool


@pytest.fixture(autouse=True)
def seeded_rng():
    """Every test starts from the same point of the global random stream."""
    random.seed(42)


@pytest.fixture
def cfg() -> SimConfig:
    return SimConfig()


@pytest.fixture
def empty_foods(cfg: SimConfig) -> FoodPool:
    return FoodPool(0, cfg.width, cfg.height)


def still_sequence() -> MovementSequence:
    """Zero speed, zero amplitude: the critter never moves and never pays for moving."""
    seq = MovementSequence(patterns=[MovementPattern(length=50) for _ in range(3)])
    seq.patterns[0].start()
    return seq


@pytest.fixture
def make_critter(cfg: SimConfig):
    def _make(position=(100.0, 100.0), health=0.0, age=0, movement=None, config=None):
        return Critter(
            config or cfg,
            position=position,
            movement=movement or still_sequence(),
            health=health,
            age=age,
        )

    return _make
