"""Minimal feed-forward neural network trained by backpropagation."""

from .connection import LayerWeighting, WeightSnapshot
from .errors import DimensionMismatch, FeedforwardError
from .functions import ActivationFunction, ErrorFunction, Identity, Sigmoid, SquaredError
from .layer import Layer
from .network import Network, NetworkState
from .neuron import Neuron
from .trainer import EpochStats, TrialStats, train, train_samples

__all__ = [
    "ActivationFunction",
    "DimensionMismatch",
    "EpochStats",
    "ErrorFunction",
    "FeedforwardError",
    "Identity",
    "Layer",
    "LayerWeighting",
    "Network",
    "NetworkState",
    "Neuron",
    "Sigmoid",
    "SquaredError",
    "TrialStats",
    "WeightSnapshot",
    "train",
    "train_samples",
]

__version__ = "0.1.0"
