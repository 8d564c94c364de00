import numpy as np

from neurite.initializers.initializer import Initializer


class ConstantFunction(Initializer):
    """Sets every weight and bias to the same value."""

    def __init__(self, value: float) -> None:
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def _weights(self, in_size, out_size, rng):
        return np.full((in_size, out_size), self._value, dtype=np.float64)

    def _bias(self, weights, rng):
        return np.full(weights.shape[1], self._value, dtype=np.float64)

    def __repr__(self):
        return f"ConstantFunction(value={self._value})"


class ZeroFunction(ConstantFunction):
    """All-zero weights and bias."""

    def __init__(self) -> None:
        super().__init__(0.0)

    def __repr__(self):
        return "ZeroFunction()"
