import numpy as np
import pytest

from backprop_net import NetworkConfig, NeuralNetwork


@pytest.fixture
def or_data():
    X = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=float)
    y = np.array([[0], [1], [1], [1]], dtype=float)
    return X, y


@pytest.fixture
def small_config():
    return NetworkConfig(
        input_neurons=2,
        hidden_neurons=3,
        output_neurons=1,
        num_epochs=200,
        learning_rate=0.2,
        log_every=0,
    )


@pytest.fixture
def trained_network(small_config, or_data):
    network = NeuralNetwork(small_config, seed=7)
    network.train(*or_data)
    return network
