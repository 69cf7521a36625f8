import pytest

from feedforward.config import TrainingConfig


def test_defaults_describe_demo_network():
    config = TrainingConfig()
    config.validate()

    assert config.layer_sizes == (9, 4, 9)
    assert config.trials == 100
    assert config.learning_rate == 0.4
    assert config.weight_range == (-0.1, 0.1)
    assert config.inputs == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)


@pytest.mark.parametrize(
    "overrides",
    [
        {"layer_sizes": (4,)},
        {"layer_sizes": (9, 0, 9)},
        {"trials": 0},
        {"learning_rate": 0.0},
        {"weight_min": 0.1, "weight_max": 0.1},
        {"inputs": (1.0, 2.0)},
        {"expected": (1.0,)},
    ],
)
def test_validate_rejects_bad_values(overrides):
    with pytest.raises(ValueError):
        TrainingConfig(**overrides).validate()
