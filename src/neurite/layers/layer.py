"""
Activation layer base class.

An ActivationLayer owns the nonlinearity applied by every neuron of one
layer: activate() on the forward pass and derivative() on the backward pass.
It also recommends the initializer used for the weights feeding into it.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from neurite.initializers import Initializer
from neurite.utils import validate_positive

logger = logging.getLogger(__name__)


class ActivationLayer:
    """
    Base activation layer.

    Subclasses must implement activate(), derivative() and
    default_initializer(). Instances hold no state that changes after
    construction, so one layer may be queried from any number of neurons.

    Args:
      neuron_count: number of neurons in the layer, must be positive
      initializer: overrides the layer's recommended initializer
    """

    def __init__(
        self, neuron_count: int, initializer: Optional[Initializer] = None
    ) -> None:
        validate_positive(neuron_count, "neuron_count")
        self._neuron_count = neuron_count
        self._initializer = (
            initializer if initializer is not None else self.default_initializer()
        )
        logger.debug(
            "created %s with %d neurons, initializer %r",
            type(self).__name__,
            neuron_count,
            self._initializer,
        )

    @property
    def neuron_count(self) -> int:
        return self._neuron_count

    @property
    def initializer(self) -> Initializer:
        """Initializer in effect for this layer (override or default)."""
        return self._initializer

    def default_initializer(self) -> Initializer:
        """Initializer this activation recommends. Must be implemented by subclasses."""
        raise NotImplementedError()

    def activate(self, x: float, previous_output: float) -> float:
        """Activated output for the given net input. Must be implemented by subclasses."""
        raise NotImplementedError()

    def derivative(self, x: float, y: float) -> float:
        """dy/dx at a point already computed by activate()."""
        raise NotImplementedError()

    def __call__(self, x: float, previous_output: float = 0.0) -> float:
        return self.activate(x, previous_output)

    def initialize(
        self, in_size: int, rng: Optional[np.random.Generator] = None
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Initial (weights, bias) for a connection of in_size inputs into this layer."""
        return self._initializer.initialize(in_size, self._neuron_count, rng)

    def __repr__(self):
        return f"{type(self).__name__}(neuron_count={self._neuron_count})"
