"""
critter_sim module: render/renderer.py

Pygame rendering of critters, food and the HUD.
"""

from __future__ import annotations
import pygame

import config
from critter.critter import Critter
from render import colors
from render.sprites import tinted
from world.food import FoodPool


def draw_food(screen: pygame.Surface, foods: FoodPool) -> None:
    # little green dots
    size = config.FOOD_SIZE
    for f in foods:
        screen.fill(colors.FOOD, pygame.Rect(int(f.x), int(f.y), size, size))


def draw_critter(screen: pygame.Surface, critter: Critter) -> None:
    # pygame rotates counter-clockwise, critter rotation is clockwise
    img = pygame.transform.rotate(tinted(critter.color), -critter.rotation)
    box = critter.bounds()
    screen.blit(img, (int(box.left), int(box.top)))


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 22)

    lines = [
        f"Population: {stats.get('population', 0)}",
        f"Births: {stats.get('births', 0)}  Deaths: {stats.get('deaths', 0)}",
        f"Avg health: {stats.get('avg_health', 0.0):.1f}",
        f"Frame: {stats.get('frame', 0)}",
    ]

    y = 8
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (10, y))
        y += 18
