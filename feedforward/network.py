import numbers
import random
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np
import structlog

from .connection import LayerWeighting, WeightSnapshot
from .errors import DimensionMismatch
from .functions import ErrorFunction, Identity, Sigmoid, SquaredError
from .layer import Layer
from .linalg import VectorLike, as_vector

logger = structlog.get_logger(__name__)

DEFAULT_WEIGHT_RANGE: Tuple[float, float] = (-0.1, 0.1)


class NetworkState(Enum):
    IDLE = "idle"
    INPUT_SET = "input_set"
    FIRED = "fired"
    LEARNED = "learned"


class Network:
    """Feed-forward multi-layer perceptron trained one sample at a time.

    The first layer uses the identity activation so the input passes through
    unchanged; every later layer uses the sigmoid. Connection ``i`` links
    layer ``i`` to layer ``i + 1``. The topology is fixed at construction.
    """

    def __init__(
        self,
        layer_sizes: Sequence[int],
        rng: random.Random,
        weight_range: Tuple[float, float] = DEFAULT_WEIGHT_RANGE,
        error_function: ErrorFunction | None = None,
    ) -> None:
        sizes = tuple(layer_sizes)
        if not all(isinstance(size, numbers.Integral) and not isinstance(size, bool) for size in sizes):
            raise ValueError(f"Layer sizes must be integers, got {list(sizes)}")
        sizes = tuple(int(size) for size in sizes)
        if len(sizes) < 2:
            raise ValueError(f"A network needs at least two layers, got {len(sizes)}")
        if any(size <= 0 for size in sizes):
            raise ValueError(f"Layer sizes must be positive, got {list(sizes)}")

        self._layer_sizes = sizes
        self.error_function = error_function or SquaredError()

        input_activation = Identity()
        hidden_activation = Sigmoid()
        self._layers: Tuple[Layer, ...] = tuple(
            Layer(input_activation if index == 0 else hidden_activation, size)
            for index, size in enumerate(sizes)
        )

        minimum, maximum = weight_range
        connections: List[LayerWeighting] = []
        for alpha, beta in zip(self._layers, self._layers[1:]):
            connection = LayerWeighting(alpha, beta)
            connection.randomize_all_weights(rng, minimum, maximum)
            connections.append(connection)
        self._connections: Tuple[LayerWeighting, ...] = tuple(connections)
        self._state = NetworkState.IDLE

        logger.debug("network_initialized", layer_sizes=list(sizes), weight_range=weight_range)

    @property
    def depth(self) -> int:
        """Number of layers including input and output."""
        return len(self._layers)

    @property
    def layer_sizes(self) -> Tuple[int, ...]:
        return self._layer_sizes

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return self._layers

    @property
    def connections(self) -> Tuple[LayerWeighting, ...]:
        return self._connections

    @property
    def state(self) -> NetworkState:
        return self._state

    @property
    def input_layer(self) -> Layer:
        return self._layers[0]

    @property
    def output_layer(self) -> Layer:
        return self._layers[-1]

    @property
    def input_layer_values(self) -> np.ndarray:
        return self.input_layer.get_output_vector()

    @property
    def output_layer_values(self) -> np.ndarray:
        return self.output_layer.get_output_vector()

    def set_input(self, values: VectorLike) -> None:
        self.input_layer.set_input_values(values)
        self._state = NetworkState.INPUT_SET

    def fire(self) -> None:
        """Forward propagate through every connection in order."""
        for connection in self._connections:
            connection.forward_propagate()
        self._state = NetworkState.FIRED

    def learn(self, learning_rate: float, expected: VectorLike) -> None:
        """Backpropagate the error against ``expected`` and update all weights.

        Output errors are seeded from the error function's derivative, then
        connections are walked from last to first so each alpha layer only
        receives its error once its beta layer's error is final.
        """
        expected = as_vector(expected)
        output_layer = self.output_layer
        if expected.shape[0] != output_layer.length:
            raise DimensionMismatch("Network.learn", expected.shape[0], output_layer.length)

        output_layer.set_error_out_values(
            self.error_function.derivative_error_vector(output_layer.get_output_vector(), expected)
        )
        for connection in reversed(self._connections):
            connection.backward_propagate(learning_rate)
        self._state = NetworkState.LEARNED

    def train_step(self, inputs: VectorLike, expected: VectorLike, learning_rate: float) -> float:
        """Run set_input, fire and learn; return the error measured before learning."""
        self.set_input(inputs)
        self.fire()
        error = self.total_error(expected)
        self.learn(learning_rate, expected)
        return error

    def error_vector(self, expected: VectorLike) -> np.ndarray:
        return self.error_function.error_vector(self.output_layer_values, expected)

    def total_error(self, expected: VectorLike) -> float:
        return self.error_function.total_error(self.output_layer_values, expected)

    def weight_snapshots(self) -> List[WeightSnapshot]:
        return [connection.snapshot() for connection in self._connections]

    def format_layer_weights(self, layer_index: int, precision: int = 3) -> str:
        """Weights from layer ``layer_index`` to the next one. The last layer has none."""
        if not 0 <= layer_index < len(self._connections):
            raise IndexError(f"Layer {layer_index} has no outgoing weights")
        return self._connections[layer_index].format_weights(precision)

    def __repr__(self) -> str:
        return f"Network(layer_sizes={list(self._layer_sizes)}, state={self._state.value})"
