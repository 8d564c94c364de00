"""Schedules — learning-rate functions selected by name or by class."""

from neurite.schedules.exponential import ExponentialFunction
from neurite.schedules.function import (
    LearningRateFunction,
    get_function,
    register_function,
    unregister_function,
)
from neurite.schedules.hyperbolic import HyperbolicFunction
from neurite.schedules.linear import LinearFunction

register_function("linear", LinearFunction)
register_function("exponential", ExponentialFunction)
register_function("hyperbolic", HyperbolicFunction)

__all__ = [
    "ExponentialFunction",
    "HyperbolicFunction",
    "LearningRateFunction",
    "LinearFunction",
    "get_function",
    "register_function",
    "unregister_function",
]
