"""Short random identifiers such as ``R4821``."""

import random
import time

_UPPER_BOUND = 99999


def generate_random_id(prefix: str) -> str:
    """Return ``prefix`` followed by a number in ``[0, 99999)``, seeded from the clock."""
    generator = random.Random(time.time_ns())
    return f"{prefix}{generator.randrange(_UPPER_BOUND)}"


def generate_id(prefix: str) -> str:
    """Return ``prefix`` followed by a number in ``[0, 99999)``, seeded from the clock."""
    generator = random.Random(time.time_ns())
    return f"{prefix}{generator.randrange(_UPPER_BOUND)}"