from typing import Iterable, Tuple

import numpy as np

from . import linalg
from .errors import DimensionMismatch
from .functions import ActivationFunction
from .linalg import VectorLike
from .neuron import Neuron


class Layer:
    """Ordered, fixed-length sequence of neurons.

    The aggregate vectors are read from and written through the neurons;
    the layer keeps no separate value store.
    """

    def __init__(self, activation: ActivationFunction, length: int) -> None:
        if length <= 0:
            raise ValueError(f"Layer length must be positive, got {length}")
        self.activation = activation
        self._neurons: Tuple[Neuron, ...] = tuple(Neuron(activation) for _ in range(length))

    @classmethod
    def from_neurons(cls, neurons: Iterable[Neuron]) -> "Layer":
        """Build a layer from copies of ``neurons``, preserving their state."""
        copies = tuple(neuron.copy() for neuron in neurons)
        if not copies:
            raise ValueError("Cannot build a layer from an empty neuron sequence")
        layer = cls.__new__(cls)
        layer.activation = copies[0].activation
        layer._neurons = copies
        return layer

    @property
    def neurons(self) -> Tuple[Neuron, ...]:
        return self._neurons

    @property
    def length(self) -> int:
        return len(self._neurons)

    def __len__(self) -> int:
        return len(self._neurons)

    def __getitem__(self, index: int) -> Neuron:
        return self._neurons[index]

    def _checked_values(self, operation: str, values: VectorLike) -> np.ndarray:
        vector = linalg.as_vector(values)
        if vector.shape[0] != self.length:
            raise DimensionMismatch(operation, vector.shape[0], self.length)
        return vector

    def set_input_values(self, values: VectorLike) -> None:
        """Assign each neuron's input positionally, recomputing outputs."""
        vector = self._checked_values("Layer.set_input_values", values)
        for neuron, value in zip(self._neurons, vector):
            neuron.input_value = value

    def set_error_out_values(self, values: VectorLike) -> None:
        vector = self._checked_values("Layer.set_error_out_values", values)
        for neuron, value in zip(self._neurons, vector):
            neuron.error_out = value

    def get_input_vector(self) -> np.ndarray:
        return np.array([neuron.input_value for neuron in self._neurons], dtype=float)

    def get_output_vector(self) -> np.ndarray:
        return np.array([neuron.output_value for neuron in self._neurons], dtype=float)

    def get_error_out_vector(self) -> np.ndarray:
        return np.array([neuron.error_out for neuron in self._neurons], dtype=float)

    def get_error_in_vector(self) -> np.ndarray:
        return np.array([neuron.error_in for neuron in self._neurons], dtype=float)

    def __repr__(self) -> str:
        return f"Layer({self.activation!r}, length={self.length})"
