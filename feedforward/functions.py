from abc import ABC, abstractmethod

import numpy as np

from . import linalg
from .errors import DimensionMismatch


class ActivationFunction(ABC):
    @abstractmethod
    def at(self, x):
        """Value of the function at ``x``."""

    @abstractmethod
    def derivative_at(self, x):
        """Derivative of the function at the input value ``x``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Identity(ActivationFunction):
    """f(x) = x, used to pass the network input through unchanged."""

    def at(self, x):
        return x

    def derivative_at(self, x):
        return np.ones_like(x, dtype=float) if isinstance(x, np.ndarray) else 1.0


class Sigmoid(ActivationFunction):
    """f(x) = 1 / (1 + e^-x).

    Large negative inputs overflow the exponential to inf, which evaluates
    to 0.0 rather than raising.
    """

    def at(self, x):
        with np.errstate(over="ignore"):
            return 1.0 / (1.0 + np.exp(-x))

    def derivative_at(self, x):
        s = self.at(x)
        return s * (1.0 - s)


class ErrorFunction(ABC):
    @abstractmethod
    def error(self, result: float, expected: float) -> float:
        """Contribution of one element to the total error."""

    @abstractmethod
    def derivative_error(self, result: float, expected: float) -> float:
        """Change in error with respect to ``result``."""

    def error_vector(self, result: np.ndarray, expected: np.ndarray) -> np.ndarray:
        result, expected = self._checked("error_vector", result, expected)
        return np.array([self.error(r, e) for r, e in zip(result, expected)], dtype=float)

    def derivative_error_vector(self, result: np.ndarray, expected: np.ndarray) -> np.ndarray:
        result, expected = self._checked("derivative_error_vector", result, expected)
        return np.array([self.derivative_error(r, e) for r, e in zip(result, expected)], dtype=float)

    def total_error(self, result: np.ndarray, expected: np.ndarray) -> float:
        return float(np.sum(self.error_vector(result, expected)))

    @staticmethod
    def _checked(operation: str, result, expected):
        result = linalg.as_vector(result)
        expected = linalg.as_vector(expected)
        if result.shape != expected.shape:
            raise DimensionMismatch(operation, result.shape, expected.shape)
        return result, expected

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SquaredError(ErrorFunction):
    """Half squared error, (expected - result)^2 / 2 per element."""

    def error(self, result: float, expected: float) -> float:
        return (expected - result) ** 2 / 2

    def derivative_error(self, result: float, expected: float) -> float:
        return result - expected

    def error_vector(self, result: np.ndarray, expected: np.ndarray) -> np.ndarray:
        result, expected = self._checked("error_vector", result, expected)
        difference = linalg.subtract(expected, result)
        return linalg.hadamard(difference, difference) / 2

    def derivative_error_vector(self, result: np.ndarray, expected: np.ndarray) -> np.ndarray:
        result, expected = self._checked("derivative_error_vector", result, expected)
        return linalg.subtract(result, expected)
