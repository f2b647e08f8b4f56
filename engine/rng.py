# engine/rng.py
from __future__ import annotations

import logging

from board import RandomNumberGenerator

logger = logging.getLogger(__name__)

MULTIPLIER = 9301
INCREMENT = 49297
MODULUS = 233280


def make_rng(seed: int) -> RandomNumberGenerator:
    """
    Create a seeded linear-congruential generator.

    The returned callable yields floats in [minimum, maximum), defaulting
    to [0, 1). The same seed always produces the same sequence. A seed of
    0 would make every draw identical, so it is replaced by 1.
    """
    if seed == 0:
        logger.warning("seed cannot be 0, defaulting to 1")
    state = int(seed) or 1

    def rng(maximum: float = 1.0, minimum: float = 0.0) -> float:
        nonlocal state
        state = (state * MULTIPLIER + INCREMENT) % MODULUS
        return minimum + (state / MODULUS) * (maximum - minimum)

    return rng
