from .functions import ActivationFunction


class Neuron:
    """A single unit holding forward and backward scalar state.

    ``output_value`` and ``error_in`` are derived fields. They are
    recomputed when ``input_value`` or ``error_out`` is written and cannot be
    assigned directly, so they always agree with the bound activation.
    """

    def __init__(self, activation: ActivationFunction, input_value: float = 0.0) -> None:
        self.activation = activation
        self._error_out = 0.0
        self._error_in = 0.0
        self.input_value = input_value

    @property
    def input_value(self) -> float:
        return self._input_value

    @input_value.setter
    def input_value(self, value: float) -> None:
        self._input_value = float(value)
        self._output_value = float(self.activation.at(self._input_value))

    @property
    def output_value(self) -> float:
        return self._output_value

    @property
    def error_out(self) -> float:
        """d(total error) / d(output_value)."""
        return self._error_out

    @error_out.setter
    def error_out(self, value: float) -> None:
        self._error_out = float(value)
        self._error_in = self._error_out * float(self.activation.derivative_at(self._input_value))

    @property
    def error_in(self) -> float:
        """d(total error) / d(input_value)."""
        return self._error_in

    def copy(self) -> "Neuron":
        """Independent neuron sharing this one's activation function."""
        clone = Neuron(self.activation, self._input_value)
        clone.error_out = self._error_out
        return clone

    def __repr__(self) -> str:
        return (
            f"Neuron({self.activation!r}, input={self._input_value:.5f}, "
            f"output={self._output_value:.5f}, error_out={self._error_out:.5f})"
        )
