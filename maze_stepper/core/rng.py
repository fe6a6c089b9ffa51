import logging
import os
import random

logger = logging.getLogger(__name__)

# Default seed of the Mersenne Twister (std::mt19937 / random.Random share the engine)
DEFAULT_SEED = 5489

# Deterministic generation for reproducible runs, e.g. MAZE_STEPPER_DETERMINISTIC=1
DETERMINISTIC = os.environ.get("MAZE_STEPPER_DETERMINISTIC", "0").strip().lower() in ("1", "true", "yes")


def make_rng(seed: int = None) -> random.Random:
    """
    Create an independent random stream for one generator.
    An explicit seed always wins; otherwise DEFAULT_SEED is used when
    DETERMINISTIC is on and system entropy when it is off.
    """
    if seed is not None:
        return random.Random(seed)
    if DETERMINISTIC:
        logger.debug(f"Deterministic RNG (seed={DEFAULT_SEED})")
        return random.Random(DEFAULT_SEED)
    return random.Random()
