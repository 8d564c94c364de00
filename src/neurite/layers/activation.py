import math

from neurite.initializers import NguyenWidrowFunction, RandomFunction
from neurite.layers.layer import ActivationLayer


class LinearLayer(ActivationLayer):
    """Identity activation."""

    def default_initializer(self):
        return NguyenWidrowFunction()

    def activate(self, x, previous_output):
        return x

    def derivative(self, x, y):
        return 1.0


class SigmoidLayer(ActivationLayer):
    """Logistic sigmoid, computed via tanh for stability."""

    def default_initializer(self):
        return NguyenWidrowFunction()

    def activate(self, x, previous_output):
        return math.tanh(x * 0.5) * 0.5 + 0.5

    def derivative(self, x, y):
        return y * (1 - y)


class TanhLayer(ActivationLayer):
    """Hyperbolic tangent."""

    def default_initializer(self):
        return NguyenWidrowFunction()

    def activate(self, x, previous_output):
        return math.tanh(x)

    def derivative(self, x, y):
        return 1 - y * y


class LogarithmLayer(ActivationLayer):
    """Symmetric logarithm: ln(1 + x) for x > 0, -ln(1 - x) otherwise.

    Odd and monotonic over the whole real line. Its derivative,
    1 / (1 + |x|), is the same expression on both branches.
    """

    def default_initializer(self):
        return NguyenWidrowFunction()

    def activate(self, x, previous_output):
        if x > 0:
            return math.log(1 + x)
        return -math.log(1 - x)

    def derivative(self, x, y):
        return 1.0 / (1 + abs(x))


class SineLayer(ActivationLayer):
    """Sine activation."""

    def default_initializer(self):
        return RandomFunction()

    def activate(self, x, previous_output):
        return math.sin(x)

    def derivative(self, x, y):
        return math.cos(x)


class GaussianLayer(ActivationLayer):
    """Gaussian bump exp(-x^2)."""

    def default_initializer(self):
        return RandomFunction()

    def activate(self, x, previous_output):
        return math.exp(-x * x)

    def derivative(self, x, y):
        return -2 * x * y
