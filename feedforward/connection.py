import random
from dataclasses import dataclass

import numpy as np

from . import linalg
from .layer import Layer

# Output of the implicit bias unit feeding every beta neuron.
BIAS_OUTPUT = 1.0


@dataclass(frozen=True)
class WeightSnapshot:
    weights: np.ndarray
    bias_weights: np.ndarray


class LayerWeighting:
    """Weights from an alpha (source) layer to a beta (destination) layer.

    ``weights[a, b]`` connects alpha neuron ``a`` to beta neuron ``b`` and
    ``bias_weights[b]`` is the weight of the bias unit into beta neuron ``b``.
    The layers are referenced, not owned.
    """

    def __init__(self, alpha_layer: Layer, beta_layer: Layer, initial_weight: float = 1.0) -> None:
        self.alpha_layer = alpha_layer
        self.beta_layer = beta_layer
        self.weights = linalg.filled(alpha_layer.length, beta_layer.length, initial_weight)
        self.bias_weights = np.full(beta_layer.length, initial_weight, dtype=float)

    @property
    def shape(self):
        return self.weights.shape

    def forward_propagate(self) -> None:
        """Write transpose(W) . alpha_output + bias into the beta layer inputs."""
        alpha_output = self.alpha_layer.get_output_vector()
        weighted = linalg.matmul(linalg.transpose(self.weights), linalg.column(alpha_output))[:, 0]
        self.beta_layer.set_input_values(linalg.add(weighted, self.bias_weights * BIAS_OUTPUT))

    def backward_propagate(self, learning_rate: float) -> None:
        """Push the beta layer error onto the alpha layer, then update weights.

        The beta errorIn is read once. The alpha errorOut must be computed
        from the weights as they were before this step's update.
        """
        beta_error_in = self.beta_layer.get_error_in_vector()
        alpha_output = self.alpha_layer.get_output_vector()
        self._propagate_alpha_error(beta_error_in)
        self._update_weights(learning_rate, beta_error_in, alpha_output)

    def _propagate_alpha_error(self, beta_error_in: np.ndarray) -> None:
        self.alpha_layer.set_error_out_values(linalg.matvec(self.weights, beta_error_in))

    def _update_weights(self, learning_rate: float, beta_error_in: np.ndarray, alpha_output: np.ndarray) -> None:
        gradient = linalg.matmul(linalg.column(alpha_output), linalg.transpose(linalg.column(beta_error_in)))
        self.weights[:] = linalg.subtract(self.weights, learning_rate * gradient)
        self.bias_weights[:] = linalg.subtract(self.bias_weights, learning_rate * beta_error_in * BIAS_OUTPUT)

    def randomize_all_weights(self, rng: random.Random, minimum: float, maximum: float) -> None:
        """Overwrite every weight and bias with an independent draw in [minimum, maximum).

        Meant for initialization only. With ``minimum == maximum`` every entry
        becomes exactly that value.
        """
        if minimum > maximum:
            raise ValueError(f"Invalid weight range [{minimum}, {maximum})")
        span = maximum - minimum
        rows, columns = self.weights.shape
        for row in range(rows):
            for column in range(columns):
                self.weights[row, column] = minimum + rng.random() * span
        for column in range(columns):
            self.bias_weights[column] = minimum + rng.random() * span

    def snapshot(self) -> WeightSnapshot:
        return WeightSnapshot(weights=self.weights.copy(), bias_weights=self.bias_weights.copy())

    def format_weights(self, precision: int = 3) -> str:
        """Tab separated weight rows followed by the bias row."""
        rows = ["\t".join(f"{value:.{precision}f}" for value in row) for row in self.weights]
        rows.append("\t".join(f"{value:.{precision}f}" for value in self.bias_weights))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"LayerWeighting({self.alpha_layer.length} -> {self.beta_layer.length})"
