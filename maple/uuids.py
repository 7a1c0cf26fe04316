"""Random 64-bit identifiers for assets and entities."""

import random

_rng = random.Random()


def generate_uuid() -> int:
    """Return a uniformly random unsigned 64-bit integer."""
    return _rng.getrandbits(64)