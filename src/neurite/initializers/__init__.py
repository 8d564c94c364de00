"""Initializers — starting weights for the connections into a layer."""

from neurite.initializers.constant import ConstantFunction, ZeroFunction
from neurite.initializers.initializer import Initializer
from neurite.initializers.nguyen_widrow import NguyenWidrowFunction
from neurite.initializers.random import RandomFunction

__all__ = [
    "Initializer",
    "ConstantFunction",
    "NguyenWidrowFunction",
    "RandomFunction",
    "ZeroFunction",
]
