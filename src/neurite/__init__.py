from neurite.core import (
    Config,
    NonPositiveError,
    OutOfRangeError,
    get_rng,
    using_config,
)
from neurite.initializers import Initializer
from neurite.layers import ActivationLayer
from neurite.schedules import LearningRateFunction, get_function

# Explicit exports for `from neurite import ...`
__all__ = [
    "Config",
    "NonPositiveError",
    "OutOfRangeError",
    "get_rng",
    "using_config",
    "Initializer",
    "ActivationLayer",
    "LearningRateFunction",
    "get_function",
]
