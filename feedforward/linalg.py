from typing import Iterable, Union

import numpy as np

from .errors import DimensionMismatch

VectorLike = Union[np.ndarray, Iterable[float]]


def as_vector(values: VectorLike) -> np.ndarray:
    if not isinstance(values, np.ndarray):
        values = list(values)
    vector = np.array(values, dtype=float)
    if vector.ndim != 1:
        raise DimensionMismatch("as_vector", vector.shape, "1-D")
    return vector


def filled(rows: int, columns: int, value: float) -> np.ndarray:
    return np.full((rows, columns), value, dtype=float)


def _require_same_length(operation: str, a: np.ndarray, b: np.ndarray) -> None:
    if a.shape != b.shape:
        raise DimensionMismatch(operation, a.shape, b.shape)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    _require_same_length("add", a, b)
    return a + b


def subtract(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    _require_same_length("subtract", a, b)
    return a - b


def hadamard(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Element-wise product of two equally sized vectors."""
    _require_same_length("hadamard", a, b)
    return a * b


def dot(a: np.ndarray, b: np.ndarray) -> float:
    _require_same_length("dot", a, b)
    return float(np.dot(a, b))


def matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    if a.ndim != 2 or b.ndim != 2 or a.shape[1] != b.shape[0]:
        raise DimensionMismatch("matmul", a.shape, b.shape)
    return a @ b


def matvec(matrix: np.ndarray, vector: np.ndarray) -> np.ndarray:
    """Multiply a [rows x cols] matrix by a vector of length cols."""
    if matrix.ndim != 2 or vector.ndim != 1 or matrix.shape[1] != vector.shape[0]:
        raise DimensionMismatch("matvec", matrix.shape, vector.shape)
    return matrix @ vector


def transpose(matrix: np.ndarray) -> np.ndarray:
    return matrix.T.copy()


def column(vector: np.ndarray) -> np.ndarray:
    """Return the [n x 1] matrix representation of a vector."""
    return vector.reshape(-1, 1).copy()
