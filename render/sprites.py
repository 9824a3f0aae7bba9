"""
critter_sim module: render/sprites.py

The critter image: a white circle (head) over a triangle (tail), built once
per process and shared by every critter. Tinted copies are cached per color.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Tuple

import pygame

import config
from render import colors


@lru_cache(maxsize=1)
def critter_texture() -> pygame.Surface:
    surf = pygame.Surface((config.SPRITE_W, config.SPRITE_H), pygame.SRCALPHA)
    surf.fill((0, 0, 0, 0))
    pygame.draw.circle(surf, colors.SPRITE, (5, 5), 5)
    pygame.draw.polygon(surf, colors.SPRITE, [(0, 5), (5, 17), (10, 5)])
    return surf


@lru_cache(maxsize=None)
def tinted(color: Tuple[int, int, int]) -> pygame.Surface:
    surf = critter_texture().copy()
    surf.fill((*color, 255), special_flags=pygame.BLEND_RGBA_MULT)
    return surf
