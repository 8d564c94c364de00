import numpy as np

from neurite.initializers.initializer import Initializer
from neurite.utils import validate_positive


class NguyenWidrowFunction(Initializer):
    """Nguyen-Widrow initialization.

    Weights start uniform in [-0.5, 0.5]; each neuron's incoming weight
    vector is then rescaled to norm beta = scale * out_size ** (1 / in_size),
    and biases are drawn uniformly from [-beta, beta]. This spreads the
    neurons' active regions evenly over the input space.

    scale: the 0.7 factor of the original method
    """

    def __init__(self, scale: float = 0.7) -> None:
        validate_positive(scale, "scale")
        self._scale = float(scale)

    @property
    def scale(self) -> float:
        return self._scale

    def beta(self, in_size: int, out_size: int) -> float:
        return self._scale * out_size ** (1.0 / in_size)

    def _weights(self, in_size, out_size, rng):
        w = rng.uniform(-0.5, 0.5, (in_size, out_size))
        norms = np.sqrt((w * w).sum(axis=0, keepdims=True))
        return w * (self.beta(in_size, out_size) / norms)

    def _bias(self, weights, rng):
        beta = self.beta(*weights.shape)
        return rng.uniform(-beta, beta, weights.shape[1])

    def __repr__(self):
        return f"NguyenWidrowFunction(scale={self._scale})"
