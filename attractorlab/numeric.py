"""Small numeric helpers shared by the attractor code."""

from __future__ import annotations

import random as _random


def random_double(lower: float, upper: float, rng: _random.Random | None = None) -> float:
    """Return a uniform random number in ``[lower, upper)``.

    The bounds may be given in either order. Without ``rng`` the module-level
    generator of :mod:`random` is used.
    """
    if lower > upper:
        lower, upper = upper, lower
    source = rng if rng is not None else _random
    return source.random() * (upper - lower) + lower


def sgn(val: float) -> int:
    """Return -1, 0 or 1 following the sign of ``val``."""
    return int(0 < val) - int(val < 0)