from neurite.schedules.function import LearningRateFunction
from neurite.utils import validate_positive


class ExponentialFunction(LearningRateFunction):
    """Rate changes geometrically: initial * (final / initial) ** (i / n).

    Both rates must be positive.
    """

    def __init__(self, initial_rate: float, final_rate: float) -> None:
        validate_positive(initial_rate, "initial_rate")
        validate_positive(final_rate, "final_rate")
        super().__init__(initial_rate, final_rate)

    def _rate(self, current_iteration, training_epochs):
        ratio = self._final_rate / self._initial_rate
        return self._initial_rate * ratio ** (current_iteration / training_epochs)
