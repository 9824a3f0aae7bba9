"""
Two-parent inheritance helpers.

Every inherited trait is taken whole from one parent or the other (no blending);
the choice is made independently per trait and per movement slot.
"""

from __future__ import annotations
import random
from typing import TypeVar

T = TypeVar("T")


def either_parent(from_parent1: T, from_parent2: T) -> T:
    """Return one of the two parents' values with even odds."""
    return from_parent1 if random.random() < 0.5 else from_parent2
