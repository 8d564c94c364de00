from neurite.schedules.function import LearningRateFunction
from neurite.utils import validate_positive


class HyperbolicFunction(LearningRateFunction):
    """Reciprocal of the rate changes linearly, so the rate follows a hyperbola.

    Both rates must be positive.
    """

    def __init__(self, initial_rate: float, final_rate: float) -> None:
        validate_positive(initial_rate, "initial_rate")
        validate_positive(final_rate, "final_rate")
        super().__init__(initial_rate, final_rate)

    def _rate(self, current_iteration, training_epochs):
        a, b = self._initial_rate, self._final_rate
        return a * b * training_epochs / (b * training_epochs + (a - b) * current_iteration)
