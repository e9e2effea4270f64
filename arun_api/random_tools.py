"""Coin flips, random numbers and random colours."""

from __future__ import annotations

import random
from typing import Optional


def flip_a_coin(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return "heads" if rng.random() < 0.5 else "tails"


def random_number(maximum: int = 100, rng: Optional[random.Random] = None) -> int:
    rng = rng or random
    return rng.randint(0, maximum)


def random_colour(rng: Optional[random.Random] = None) -> dict:
    rng = rng or random
    red, green, blue = (rng.randint(0, 255) for _ in range(3))
    return {
        "hex": f"#{red:02x}{green:02x}{blue:02x}",
        "rgb": [red, green, blue],
    }
