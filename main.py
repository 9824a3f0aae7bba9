"""
Crittevolution: critters wander, eat, mate and die; their gaits evolve over generations.

Modes:
- Window (default): live pygame view, Esc or closing the window quits
- Headless: no window, stats logged every N frames
"""

from __future__ import annotations
import argparse
import logging
import random
import time
from typing import Optional

import pygame

import config
from render import colors
from render.renderer import draw_critter, draw_food, draw_hud
from world.population import Population

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def seed_rng(seed: Optional[int]) -> int:
    if seed is None:
        seed = time.time_ns()
    random.seed(seed)
    logger.info("Random seed: %d", seed)
    return seed


def run_window(population: Population) -> None:
    pygame.init()
    screen = pygame.display.set_mode((population.cfg.width, population.cfg.height))
    pygame.display.set_caption("Crittevolution")
    clock = pygame.time.Clock()

    running = True
    while running:
        clock.tick(config.FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                running = False

        population.update()

        screen.fill(colors.BG)
        draw_food(screen, population.foods)
        for critter in population.critters:
            draw_critter(screen, critter)
        draw_hud(screen, population.stats())

        pygame.display.flip()

    pygame.quit()


def run_headless(population: Population, max_frames: int, stats_interval: int) -> None:
    for _ in range(max_frames):
        population.update()

        if stats_interval and population.frame % stats_interval == 0:
            s = population.stats()
            logger.info(
                "Frame %d: population=%d births=%d deaths=%d avg_health=%.1f",
                s["frame"], s["population"], s["births"], s["deaths"], s["avg_health"],
            )

        if not population.critters:
            logger.info("Population extinct at frame %d", population.frame)
            break


def main(argv=None):
    parser = argparse.ArgumentParser(description="Crittevolution population simulation")
    parser.add_argument(
        "--config",
        default=config.CONFIG_FILE,
        metavar="PATH",
        help=f"Configuration file (default: {config.CONFIG_FILE})",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (default: time based)"
    )
    parser.add_argument(
        "--headless", action="store_true", help="Run without a window, log stats only"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=10000,
        help="Frames to simulate in headless mode (default: 10000)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=500,
        help="Log stats every N frames in headless mode (default: 500)",
    )
    args = parser.parse_args(argv)

    cfg = config.load_config(args.config)
    config.log_config(cfg)
    seed_rng(args.seed)

    population = Population.random(cfg)

    if args.headless:
        run_headless(population, args.max_frames, args.stats_interval)
    else:
        run_window(population)


if __name__ == "__main__":
    main()
