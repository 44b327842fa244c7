"""Random source handling for the generators."""

import numpy as np

RandomSource = np.random.Generator | int | None


def coerce_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return a ``numpy.random.Generator``.

    Args:
        rng: An existing Generator (used as is), an integer seed, or None for
            fresh OS entropy.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)
