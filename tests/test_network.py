import random

import numpy as np
import pytest

from feedforward import DimensionMismatch, Identity, Network, NetworkState, Sigmoid


def _sigmoid(z):
    return 1.0 / (1.0 + np.exp(-z))


def test_topology_follows_layer_sizes(rng):
    network = Network([3, 4, 2], rng)

    assert network.depth == 3
    assert network.layer_sizes == (3, 4, 2)
    assert [len(layer) for layer in network.layers] == [3, 4, 2]
    assert len(network.connections) == 2
    for index, connection in enumerate(network.connections):
        assert connection.alpha_layer is network.layers[index]
        assert connection.beta_layer is network.layers[index + 1]
        assert connection.shape == (network.layer_sizes[index], network.layer_sizes[index + 1])


def test_first_layer_is_identity_and_the_rest_sigmoid(rng):
    network = Network([2, 3, 3, 1], rng)

    assert isinstance(network.layers[0].activation, Identity)
    assert all(isinstance(layer.activation, Sigmoid) for layer in network.layers[1:])


def test_weights_are_randomized_in_default_range(rng):
    network = Network([5, 6, 4], rng)

    for snapshot in network.weight_snapshots():
        values = np.concatenate([snapshot.weights.ravel(), snapshot.bias_weights])
        assert np.all((values >= -0.1) & (values < 0.1))


def test_custom_weight_range(rng):
    network = Network([2, 2], rng, weight_range=(0.5, 0.5))

    assert np.all(network.connections[0].weights == 0.5)


@pytest.mark.parametrize("sizes", [[], [3], [2, 0], [2, -1, 3]])
def test_rejects_invalid_sizes(sizes, rng):
    with pytest.raises(ValueError):
        Network(sizes, rng)


def test_single_step_fire_outputs_sigmoid_of_zero(rng):
    network = Network([1, 1], rng)
    network.connections[0].weights[:] = 1.0
    network.connections[0].bias_weights[:] = 0.0

    network.set_input([0.0])
    network.fire()

    np.testing.assert_array_equal(network.output_layer_values, [0.5])
    np.testing.assert_array_equal(network.input_layer_values, [0.0])


def test_input_layer_values_pass_through(rng):
    network = Network([3, 2], rng)
    network.set_input([0.1, -2.0, 7.5])

    np.testing.assert_array_equal(network.input_layer_values, [0.1, -2.0, 7.5])


def test_set_input_mismatch(rng):
    network = Network([3, 2], rng)
    network.set_input([1.0, 2.0, 3.0])

    with pytest.raises(DimensionMismatch):
        network.set_input([1.0, 2.0])

    np.testing.assert_array_equal(network.input_layer_values, [1.0, 2.0, 3.0])


def test_learn_rejects_wrong_expected_length_without_mutating(rng):
    network = Network([2, 3, 2], rng)
    network.set_input([1.0, 0.0])
    network.fire()
    before = network.weight_snapshots()

    with pytest.raises(DimensionMismatch):
        network.learn(0.5, [1.0, 0.0, 1.0])

    for old, connection in zip(before, network.connections):
        np.testing.assert_array_equal(old.weights, connection.weights)
        np.testing.assert_array_equal(old.bias_weights, connection.bias_weights)
    np.testing.assert_array_equal(network.output_layer.get_error_out_vector(), [0.0, 0.0])


def test_state_follows_training_step(rng):
    network = Network([2, 1], rng)
    assert network.state is NetworkState.IDLE

    network.set_input([1.0, 1.0])
    assert network.state is NetworkState.INPUT_SET
    network.fire()
    assert network.state is NetworkState.FIRED
    network.learn(0.1, [1.0])
    assert network.state is NetworkState.LEARNED
    network.set_input([0.0, 1.0])
    assert network.state is NetworkState.INPUT_SET


def test_learn_matches_hand_computed_backprop():
    network = Network([2, 3, 2], random.Random(3), weight_range=(-0.5, 0.5))
    first, second = network.connections
    w1, b1 = first.weights.copy(), first.bias_weights.copy()
    w2, b2 = second.weights.copy(), second.bias_weights.copy()
    x = np.array([0.3, -0.8])
    target = np.array([1.0, 0.0])
    learning_rate = 0.4

    network.set_input(x)
    network.fire()
    network.learn(learning_rate, target)

    hidden = _sigmoid(w1.T @ x + b1)
    output = _sigmoid(w2.T @ hidden + b2)
    delta_out = (output - target) * output * (1 - output)
    delta_hidden = (w2 @ delta_out) * hidden * (1 - hidden)

    np.testing.assert_allclose(second.weights, w2 - learning_rate * np.outer(hidden, delta_out))
    np.testing.assert_allclose(second.bias_weights, b2 - learning_rate * delta_out)
    np.testing.assert_allclose(first.weights, w1 - learning_rate * np.outer(x, delta_hidden))
    np.testing.assert_allclose(first.bias_weights, b1 - learning_rate * delta_hidden)
    np.testing.assert_allclose(network.layers[1].get_error_in_vector(), delta_hidden)


def test_total_error_uses_current_output(rng):
    network = Network([1, 1], rng)
    network.connections[0].weights[:] = 1.0
    network.connections[0].bias_weights[:] = 0.0
    network.set_input([0.0])
    network.fire()

    assert network.total_error([1.0]) == pytest.approx(0.125)
    np.testing.assert_allclose(network.error_vector([1.0]), [0.125])


def test_train_step_reduces_error(rng):
    network = Network([2, 2], rng)
    inputs, expected = [1.0, 0.5], [0.9, 0.1]

    first = network.train_step(inputs, expected, 0.5)
    second = network.train_step(inputs, expected, 0.5)

    assert second < first


def test_error_decreases_over_training():
    network = Network([2, 1], random.Random(7))
    inputs, expected = [1.0, 1.0], [0.7]

    errors = [network.train_step(inputs, expected, 0.1) for _ in range(500)]

    non_decreasing = sum(1 for before, after in zip(errors, errors[1:]) if after >= before)
    assert non_decreasing <= 5
    assert errors[-1] < 1e-3


def test_format_layer_weights(rng):
    network = Network([2, 3, 1], rng)

    assert len(network.format_layer_weights(0).splitlines()) == 3
    assert len(network.format_layer_weights(1).splitlines()) == 4
    with pytest.raises(IndexError):
        network.format_layer_weights(2)


@pytest.mark.parametrize("sizes", [[2, 2.5], [2.0, 1], [True, 1]])
def test_rejects_non_integer_sizes(sizes, rng):
    with pytest.raises(ValueError, match="integers"):
        Network(sizes, rng)


def test_accepts_numpy_integer_sizes(rng):
    network = Network(np.array([3, 2]), rng)

    assert network.layer_sizes == (3, 2)
