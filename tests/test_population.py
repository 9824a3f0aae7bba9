"""Tests for world.population: frame orchestration, births and deaths."""

from __future__ import annotations

from config import SimConfig
from world.food import FoodPool
from world.population import Population


class TestPopulationCreate:
    def test_random_uses_config(self) -> None:
        cfg = SimConfig(critters=7, foods=13)
        pop = Population.random(cfg)
        assert len(pop) == 7
        assert len(pop.foods) == 13
        assert pop.frame == 0


class TestFrame:
    def test_dead_are_removed_at_end_of_frame(self, make_critter, empty_foods) -> None:
        cfg = SimConfig(age_limit=10)
        old = make_critter(age=9, config=cfg)
        young = make_critter(age=0, config=cfg)
        pop = Population(cfg, critters=[old, young], foods=empty_foods)

        stats = pop.update()

        assert stats.died == 1
        assert pop.critters == [young]
        assert pop.deaths == 1
        assert pop.frame == 1

    def test_newborn_not_updated_in_birth_frame(self, make_critter, empty_foods) -> None:
        a = make_critter(age=500, health=300.0)
        b = make_critter(age=500, health=300.0)
        pop = Population(a.cfg, critters=[a, b], foods=empty_foods)

        pop.update()
        child = pop.critters[-1]
        assert child.age == 0

        pop.update()
        assert child.age == 1
        assert pop.births == 1

    def test_everyone_dies_eventually(self) -> None:
        cfg = SimConfig(age_limit=40, critters=10, foods=0)
        pop = Population.random(cfg)
        for _ in range(40):
            pop.update()
        assert len(pop) == 0
        assert pop.deaths == 10
        assert pop.avg_health() == 0.0

    def test_food_pool_size_constant_during_run(self) -> None:
        cfg = SimConfig(critters=30, foods=50)
        pop = Population.random(cfg)
        for _ in range(300):
            pop.update()
            assert len(pop.foods) == 50

    def test_stats(self, make_critter) -> None:
        cfg = SimConfig()
        c = make_critter(health=12.0)
        pop = Population(cfg, critters=[c], foods=FoodPool(0, cfg.width, cfg.height))
        pop.update()
        s = pop.stats()
        assert s["population"] == 1
        assert s["frame"] == 1
        assert s["avg_health"] == 12.0
        assert s["births"] == 0
        assert s["deaths"] == 0
