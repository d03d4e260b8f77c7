import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

DISTRIBUTION_TYPES = ("random", "sorted", "reverse", "nearly-sorted", "duplicates")


def generate_array(
    size: int,
    distribution: str = "random",
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Generate an int64 input array for benchmarking.

    Parameters
    ----------
    size : int
        Number of elements, must be non-negative.
    distribution : str
        One of `DISTRIBUTION_TYPES`. Unknown names fall back to `"random"`.
    rng : np.random.Generator | None
        Random source, by default a fresh generator seeded with 42.

    Returns
    -------
    np.ndarray
        The generated keys.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    if rng is None:
        rng = np.random.default_rng(42)

    kind = distribution.lower()
    if kind == "sorted":
        return np.arange(size, dtype=np.int64)
    if kind == "reverse":
        return np.arange(size, 0, -1, dtype=np.int64)
    if kind == "nearly-sorted":
        array = np.arange(size, dtype=np.int64)
        for _ in range(size // 20):
            i, j = rng.integers(0, size, size=2)
            array[i], array[j] = array[j], array[i]
        return array
    if kind == "duplicates":
        unique_count = max(1, size // 10)
        return rng.integers(0, unique_count, size=size, dtype=np.int64)
    if kind != "random":
        logger.warning("Unknown distribution %r, using random", distribution)

    return rng.integers(0, max(1, size * 10), size=size, dtype=np.int64)
