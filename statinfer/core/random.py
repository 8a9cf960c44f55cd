"""
Seeded random number generation.

Every stochastic routine in statinfer draws from a numpy Generator built
here, never from the global numpy state. Passing the same seed always
reproduces the same stream.

Accepted seed forms:
    None            - fresh OS entropy (non-reproducible)
    int             - reproducible stream
    SeedSequence    - reproducible stream, useful for spawning children
    Generator       - used as-is (caller owns the stream)
"""

from __future__ import annotations

from typing import Union

import numpy as np

from statinfer.core.exceptions import InvalidParameterError

SeedLike = Union[None, int, np.integer, np.random.SeedSequence, np.random.Generator]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Build a numpy Generator (PCG64) from a seed-like value.

    Args:
        seed: None, non-negative int, SeedSequence or Generator

    Returns:
        numpy.random.Generator

    Raises:
        InvalidParameterError: If the seed is negative or of an unsupported type
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None or isinstance(seed, np.random.SeedSequence):
        return np.random.default_rng(seed)
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise InvalidParameterError(
            f"seed must be None, an int, a SeedSequence or a Generator, "
            f"got {type(seed).__name__}"
        )
    if seed < 0:
        raise InvalidParameterError(f"seed must be non-negative, got {seed}")
    return np.random.default_rng(int(seed))


def describe_seed(seed: SeedLike) -> int | str | None:
    """Seed as recorded in Result.info: ints verbatim, anything else by kind."""
    if seed is None or isinstance(seed, (int, np.integer)):
        return None if seed is None else int(seed)
    return type(seed).__name__
