"""Tests for critter.movement."""

from __future__ import annotations

import pytest

import config
from critter.movement import MovementPattern, MovementSequence


def _pattern(dx: float, length: int) -> MovementPattern:
    return MovementPattern(speed=(dx, 0.0), length=length)


class TestMovementPattern:
    def test_random_length_in_range(self) -> None:
        lo, hi = config.LENGTH_RANGE
        for _ in range(500):
            p = MovementPattern.random()
            assert lo <= p.length < hi

    def test_exactly_length_moves_then_exhausted(self) -> None:
        for _ in range(20):
            p = MovementPattern.random()
            p.start()
            for _ in range(p.length):
                assert p.advance() is not None
            assert p.advance() is None

    def test_not_started_is_exhausted(self) -> None:
        p = MovementPattern.random()
        assert p.advance() is None

    def test_restart_resets_countdown(self) -> None:
        p = _pattern(1.0, 3)
        p.start()
        for _ in range(3):
            p.advance()
        assert p.advance() is None
        p.start()
        assert p.advance() == (1.0, 0.0)

    def test_displacement_formula(self) -> None:
        p = MovementPattern(
            speed=(0.5, -0.5), radius=(2.0, 3.0), tick_speed=(0.1, 0.2), length=5
        )
        p.start()
        dx, dy = p.advance()
        assert p.tick == pytest.approx((0.1, 0.2))
        assert dx == pytest.approx(0.5 + 2.0 * 0.9950041652780258)
        assert dy == pytest.approx(-0.5 + 3.0 * 0.19866933079506122)

    def test_clone_is_independent(self) -> None:
        p = MovementPattern.random()
        c = p.clone()
        assert c == p
        assert c is not p
        c.start()
        c.advance()
        assert c != p


class TestMovementSequence:
    def test_random_has_started_first_slot(self) -> None:
        seq = MovementSequence.random()
        assert len(seq.patterns) == config.NUM_MOVEMENTS
        assert seq.current == 0
        assert seq.patterns[0].counter == seq.patterns[0].length

    def test_never_exhausted(self) -> None:
        seq = MovementSequence.random()
        for _ in range(2000):
            move = seq.advance()
            assert move is not None
            assert len(move) == 2

    def test_transitions_are_seamless_and_wrap(self) -> None:
        seq = MovementSequence(patterns=[_pattern(1.0, 2), _pattern(2.0, 3), _pattern(3.0, 1)])
        seq.patterns[0].start()

        xs = [seq.advance()[0] for _ in range(12)]
        assert xs == [1.0, 1.0, 2.0, 2.0, 2.0, 3.0, 1.0, 1.0, 2.0, 2.0, 2.0, 3.0]
        assert seq.current == 2


class TestInheritance:
    def test_each_slot_copied_from_same_index_of_a_parent(self) -> None:
        a = MovementSequence.random()
        b = MovementSequence.random()
        for _ in range(50):
            child = MovementSequence.inherit(a, b)
            for k, slot in enumerate(child.patterns):
                assert slot == a.patterns[k] or slot == b.patterns[k]
                assert slot is not a.patterns[k]
                assert slot is not b.patterns[k]

    def test_slots_chosen_independently(self) -> None:
        a = MovementSequence.random()
        b = MovementSequence.random()
        picks = set()
        for _ in range(200):
            child = MovementSequence.inherit(a, b)
            picks.add(tuple(slot == a.patterns[k] for k, slot in enumerate(child.patterns)))
        # all 8 combinations show up, not just "all from a" / "all from b"
        assert len(picks) == 8

    def test_child_starts_first_slot(self) -> None:
        a = MovementSequence.random()
        b = MovementSequence.random()
        child = MovementSequence.inherit(a, b)
        assert child.current == 0
        assert child.patterns[0].counter == child.patterns[0].length
        assert child.advance() is not None
