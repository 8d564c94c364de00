"""Layers — per-neuron activation functions and their derivatives."""

from neurite.layers.activation import (
    GaussianLayer,
    LinearLayer,
    LogarithmLayer,
    SigmoidLayer,
    SineLayer,
    TanhLayer,
)
from neurite.layers.layer import ActivationLayer

__all__ = [
    "ActivationLayer",
    "GaussianLayer",
    "LinearLayer",
    "LogarithmLayer",
    "SigmoidLayer",
    "SineLayer",
    "TanhLayer",
]
