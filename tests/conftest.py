import random

import pytest
import structlog

from feedforward import Identity, Layer, LayerWeighting, Sigmoid


@pytest.fixture
def rng():
    return random.Random(1)


@pytest.fixture
def connection():
    """2 -> 3 connection with fixed weights and a fired alpha layer."""
    alpha = Layer(Identity(), 2)
    beta = Layer(Sigmoid(), 3)
    weighting = LayerWeighting(alpha, beta)
    weighting.weights[:] = [[0.2, -0.4, 0.1], [0.7, 0.3, -0.5]]
    weighting.bias_weights[:] = [0.1, 0.2, 0.3]
    alpha.set_input_values([0.5, -1.0])
    return weighting


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
