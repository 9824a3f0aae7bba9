"""
Simulation tuning knobs + the runtime configuration loaded from the ``conf`` file.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

# Environment
WIDTH, HEIGHT = 800, 600
FPS = 60

# Movement
NUM_MOVEMENTS = 3  # patterns per critter gait
SPEED_SIGMA = 1.0
RADIUS_SIGMA = 3.0
TICK_SPEED_SIGMA = 0.2
LENGTH_RANGE = (20, 200)  # [min, max) frames per pattern

# Looks
COLOR_RANGE = (50, 255)
SPRITE_W, SPRITE_H = 10, 17
FOOD_SIZE = 2

# Defaults for the configurable values
DEF_AGE_LIMIT = 2000
DEF_MATE_HEALTH = 300
DEF_FOODS = 200
DEF_FOOD_POWER = 300
DEF_NUM_CRITTERS = 20

CONFIG_FILE = "conf"


@dataclass(frozen=True)
class SimConfig:
    """
    Parameters read once at startup and handed to Population / Critter.

    age_limit:    frames a critter lives
    mate_health:  minimum health to be allowed to mate
    foods:        size of the food pool
    food_power:   health gained per food eaten
    critters:     initial population size
    """
    age_limit: int = DEF_AGE_LIMIT
    mate_health: int = DEF_MATE_HEALTH
    foods: int = DEF_FOODS
    food_power: int = DEF_FOOD_POWER
    critters: int = DEF_NUM_CRITTERS
    width: int = WIDTH
    height: int = HEIGHT

    @property
    def mate_age_range(self) -> Tuple[int, int]:
        quarter = self.age_limit // 4
        return quarter, quarter * 3


# config file key -> SimConfig field
_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    "age_limit": re.compile(r"age\s*=\s*(\d+)"),
    "mate_health": re.compile(r"health\s*=\s*(\d+)"),
    "foods": re.compile(r"foods\s*=\s*(\d+)"),
    "food_power": re.compile(r"foodpower\s*=\s*(\d+)"),
    "critters": re.compile(r"critters\s*=\s*(\d+)"),
}


def parse_config(text: str) -> Dict[str, int]:
    """
    Scan ``key = NUM`` lines. Every line is tested against every key, so the
    order does not matter and the last match for a key wins. Anything else is ignored.
    """
    values: Dict[str, int] = {}
    for line in text.splitlines():
        for field_name, rgx in _PATTERNS.items():
            match = rgx.search(line)
            if match:
                values[field_name] = int(match.group(1))
    return values


def load_config(path: str = CONFIG_FILE) -> SimConfig:
    """
    Read the five configurable values from ``path``. A missing or unreadable
    file is not an error: defaults are used.

    File format:
        age = NUM
        health = NUM
        foods = NUM
        foodpower = NUM
        critters = NUM
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except FileNotFoundError:
        logger.info("No config file at %s, using defaults", path)
        return SimConfig()
    except OSError as e:
        logger.warning("Could not read config file %s (%s), using defaults", path, e)
        return SimConfig()

    logger.info("Loading from file %s", path)
    return SimConfig(**parse_config(text))


def log_config(cfg: SimConfig) -> None:
    logger.info("Using:")
    logger.info("   Age limit: %d", cfg.age_limit)
    logger.info("   Min health to mate: %d", cfg.mate_health)
    logger.info("   Num of foods: %d", cfg.foods)
    logger.info("   Food power: %d", cfg.food_power)
    logger.info("   Initial num critters: %d", cfg.critters)
