from neurite.schedules.function import LearningRateFunction


class LinearFunction(LearningRateFunction):
    """Rate changes uniformly from initial_rate towards final_rate.

    The step is (final - initial) / training_epochs, so the last valid
    iteration stops one step short of final_rate.
    """

    def _rate(self, current_iteration, training_epochs):
        return (
            self._initial_rate
            + (self._final_rate - self._initial_rate)
            * current_iteration
            / training_epochs
        )
