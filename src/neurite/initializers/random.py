import numpy as np

from neurite.initializers.initializer import Initializer


class RandomFunction(Initializer):
    """Uniform random weights and bias in [min_limit, max_limit)."""

    def __init__(self, min_limit: float = -0.5, max_limit: float = 0.5) -> None:
        if min_limit >= max_limit:
            raise ValueError(
                f"min_limit must be less than max_limit, got {min_limit} >= {max_limit}"
            )
        self._min_limit = float(min_limit)
        self._max_limit = float(max_limit)

    @property
    def min_limit(self) -> float:
        return self._min_limit

    @property
    def max_limit(self) -> float:
        return self._max_limit

    def _weights(self, in_size, out_size, rng):
        return rng.uniform(self._min_limit, self._max_limit, (in_size, out_size))

    def _bias(self, weights, rng):
        return rng.uniform(self._min_limit, self._max_limit, weights.shape[1])

    def __repr__(self):
        return f"RandomFunction(min_limit={self._min_limit}, max_limit={self._max_limit})"
