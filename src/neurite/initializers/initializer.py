"""
Weight initializers.

An initializer produces the starting weights and bias for a fully-connected
connection into a layer. Activation layers recommend one by default; callers
may pass their own.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from neurite.core import get_rng
from neurite.utils import validate_positive

logger = logging.getLogger(__name__)


class Initializer:
    """Base initializer.

    Subclasses implement _weights(in_size, out_size, rng) and optionally
    _bias(weights, rng). Configuration is fixed at construction.
    """

    def initialize(
        self,
        in_size: int,
        out_size: int,
        rng: Optional[np.random.Generator] = None,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Return (weights, bias) shaped (in_size, out_size) and (out_size,)."""
        validate_positive(in_size, "in_size")
        validate_positive(out_size, "out_size")
        rng = get_rng(rng)
        weights = self._weights(in_size, out_size, rng)
        bias = self._bias(weights, rng)
        logger.debug(
            "%s initialized %dx%d weights", type(self).__name__, in_size, out_size
        )
        return weights, bias

    def _weights(self, in_size: int, out_size: int, rng) -> np.ndarray:
        raise NotImplementedError()

    def _bias(self, weights: np.ndarray, rng) -> np.ndarray:
        return np.zeros(weights.shape[1], dtype=np.float64)

    def __repr__(self):
        return f"{type(self).__name__}()"
