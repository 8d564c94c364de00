"""Core — global configuration and error types.

Config flags shared across neurite, the context manager used to override
them temporarily, and the argument error types raised by the validation
helpers.
"""

from __future__ import annotations

import contextlib
from typing import Any, Optional, Tuple

import numpy as np


class Config:
    """Global config flags affecting weight initialization."""

    seed: Optional[int] = None


# (seed, generator) shared by every initialize() call made under that seed
_seeded_rng: Optional[Tuple[int, np.random.Generator]] = None


@contextlib.contextmanager
def using_config(name: str, value: Any):
    """Temporarily set a Config attribute inside a context.

    Entering or leaving a "seed" context restarts the seeded generator, so the
    same seed replays the same sequence of draws.
    """
    global _seeded_rng
    old_value = getattr(Config, name)
    setattr(Config, name, value)
    if name == "seed":
        _seeded_rng = None
    try:
        yield
    finally:
        setattr(Config, name, old_value)
        if name == "seed":
            _seeded_rng = None


def get_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return rng, or the generator for Config.seed.

    With a seed set, successive calls continue one stream seeded from it;
    without one, each call gets fresh OS entropy.
    """
    global _seeded_rng
    if rng is not None:
        return rng
    if Config.seed is None:
        return np.random.default_rng()
    if _seeded_rng is None or _seeded_rng[0] != Config.seed:
        _seeded_rng = (Config.seed, np.random.default_rng(Config.seed))
    return _seeded_rng[1]


class NonPositiveError(ValueError):
    """Raised when an argument that must be strictly positive is not."""

    def __init__(self, name: str, value) -> None:
        super().__init__(f"{name} must be positive, got {value!r}")
        self.name = name
        self.value = value


class OutOfRangeError(ValueError):
    """Raised when an argument falls outside its inclusive range."""

    def __init__(self, name: str, value, low, high) -> None:
        super().__init__(f"{name} must be within [{low}, {high}], got {value!r}")
        self.name = name
        self.value = value
        self.low = low
        self.high = high
