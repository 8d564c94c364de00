"""
Learning-rate functions.

A learning-rate function maps training progress (current iteration out of
the total number of epochs) to the rate used to scale weight updates. Each
variant is configured once with an initial and a final rate.
"""

import logging
import operator
from typing import Dict, Type

from neurite.utils import validate_positive, validate_within_range

logger = logging.getLogger(__name__)


class LearningRateFunction:
    """Base learning-rate function.

    Subclasses implement _rate(current_iteration, training_epochs); arguments
    are validated by get_rate() before _rate() sees them.
    """

    def __init__(self, initial_rate: float, final_rate: float) -> None:
        self._initial_rate = float(initial_rate)
        self._final_rate = float(final_rate)
        logger.debug(
            "created %s from %g to %g",
            type(self).__name__,
            self._initial_rate,
            self._final_rate,
        )

    @property
    def initial_rate(self) -> float:
        return self._initial_rate

    @property
    def final_rate(self) -> float:
        return self._final_rate

    def get_rate(self, current_iteration: int, training_epochs: int) -> float:
        """Effective learning rate for current_iteration.

        Both arguments must be integers (TypeError otherwise). Raises
        NonPositiveError if training_epochs <= 0 and OutOfRangeError if
        current_iteration is outside [0, training_epochs - 1].
        """
        current_iteration = operator.index(current_iteration)
        training_epochs = operator.index(training_epochs)
        validate_positive(training_epochs, "training_epochs")
        validate_within_range(
            current_iteration, 0, training_epochs - 1, "current_iteration"
        )
        return self._rate(current_iteration, training_epochs)

    def _rate(self, current_iteration: int, training_epochs: int) -> float:
        raise NotImplementedError()

    def __call__(self, current_iteration: int, training_epochs: int) -> float:
        return self.get_rate(current_iteration, training_epochs)

    def __repr__(self):
        return (
            f"{type(self).__name__}(initial_rate={self._initial_rate}, "
            f"final_rate={self._final_rate})"
        )


_registry: Dict[str, Type[LearningRateFunction]] = {}


def register_function(
    name: str, cls: Type[LearningRateFunction], overwrite: bool = False
) -> None:
    """Make cls selectable by name through get_function().

    Raises ValueError if name is already taken, unless overwrite is set.
    """
    if name in _registry and not overwrite:
        raise ValueError(f"learning-rate function {name!r} is already registered")
    _registry[name] = cls


def unregister_function(name: str) -> None:
    """Remove the learning-rate function registered under name."""
    del _registry[name]


def get_function(name: str, initial_rate: float, final_rate: float) -> LearningRateFunction:
    """Build the learning-rate function registered under name."""
    try:
        cls = _registry[name]
    except KeyError:
        raise KeyError(
            f"unknown learning-rate function {name!r}, choose from {sorted(_registry)}"
        ) from None
    return cls(initial_rate, final_rate)
