from ffnet.errors import (NumericDomainError, ShapeMismatchError,
                          UncalledForwardError)
from ffnet.layers import Dense, LeakyReLU, Layer, ReLU, Sigmoid, Tanh
from ffnet.losses import BinaryCrossEntropy, bce_loss, bce_loss_gradient
from ffnet.models import Sequential, create_xor_network

__version__ = "0.1.0"

__all__ = [
    "BinaryCrossEntropy",
    "Dense",
    "Layer",
    "LeakyReLU",
    "NumericDomainError",
    "ReLU",
    "Sequential",
    "ShapeMismatchError",
    "Sigmoid",
    "Tanh",
    "UncalledForwardError",
    "bce_loss",
    "bce_loss_gradient",
    "create_xor_network",
]
