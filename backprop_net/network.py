import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .activations import sigmoid, sigmoid_prime
from .config import NetworkConfig
from .errors import EmptyBiasesError, EmptyWeightsError, StructuralError

logger = logging.getLogger(__name__)


@dataclass
class NetworkParameters:
    """Learned weights and biases of the hidden and output layers"""
    w_hidden: np.ndarray  # (inputs, hidden)
    b_hidden: np.ndarray  # (1, hidden)
    w_out: np.ndarray     # (hidden, outputs)
    b_out: np.ndarray     # (1, outputs)

    def copy(self) -> "NetworkParameters":
        return NetworkParameters(
            w_hidden=self.w_hidden.copy(),
            b_hidden=self.b_hidden.copy(),
            w_out=self.w_out.copy(),
            b_out=self.b_out.copy(),
        )


def sum_along_axis(axis: int, m: np.ndarray) -> np.ndarray:
    """Sum a matrix over rows (axis 0, gives 1 x cols) or columns (axis 1, gives rows x 1)."""
    if m.ndim != 2:
        raise StructuralError(f"expected a matrix, got an array with {m.ndim} dimensions")

    rows, cols = m.shape
    if rows == 0 or cols == 0:
        raise StructuralError(f"cannot sum a matrix with zero dimension: shape {m.shape}")

    if axis == 0:
        return np.sum(m, axis=0, keepdims=True)
    if axis == 1:
        return np.sum(m, axis=1, keepdims=True)
    raise StructuralError("invalid axis value")


def forward(x: np.ndarray, params: NetworkParameters) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    hidden_in = x @ params.w_hidden + params.b_hidden
    hidden_act = sigmoid(hidden_in)
    out_in = hidden_act @ params.w_out + params.b_out
    output = sigmoid(out_in)
    return hidden_in, hidden_act, out_in, output


class NeuralNetwork:
    """Two-layer sigmoid network trained with full-batch gradient descent.

    Parameters stay unset until ``train`` completes; a successful call
    replaces all four matrices at once and a failed call leaves the
    previous ones in place.
    """

    def __init__(self, config: NetworkConfig, seed: Optional[int] = None):
        self.config = config
        # None means a fresh wall-clock seed on every train call
        self.seed = seed
        self._params: Optional[NetworkParameters] = None

    @property
    def parameters(self) -> Optional[NetworkParameters]:
        if self._params is None:
            return None
        return self._params.copy()

    @property
    def is_trained(self) -> bool:
        params = self._params
        if params is None:
            return False
        return all(
            getattr(params, name).size > 0
            for name in ("w_hidden", "b_hidden", "w_out", "b_out")
        )

    def _as_matrix(self, m, name: str, columns: int) -> np.ndarray:
        m = np.asarray(m, dtype=float)
        if m.ndim != 2:
            raise StructuralError(f"{name} must be a 2-D matrix, got shape {m.shape}")
        if m.shape[1] != columns:
            raise StructuralError(f"{name} must have {columns} columns, got {m.shape[1]}")
        return m

    def _init_parameters(self, rng: np.random.Generator) -> NetworkParameters:
        cfg = self.config
        # Draw order matters for reproducibility with a fixed seed
        w_hidden = rng.random((cfg.input_neurons, cfg.hidden_neurons))
        b_hidden = rng.random((1, cfg.hidden_neurons))
        w_out = rng.random((cfg.hidden_neurons, cfg.output_neurons))
        b_out = rng.random((1, cfg.output_neurons))
        return NetworkParameters(w_hidden, b_hidden, w_out, b_out)

    def train(self, x, y) -> None:
        cfg = self.config
        x = self._as_matrix(x, "x", cfg.input_neurons)
        y = self._as_matrix(y, "y", cfg.output_neurons)
        if x.shape[0] != y.shape[0]:
            raise StructuralError(
                f"x and y must have the same number of rows, got {x.shape[0]} and {y.shape[0]}"
            )

        seed = self.seed if self.seed is not None else time.time_ns()
        params = self._init_parameters(np.random.default_rng(seed))
        logger.debug(f"Initialized parameters with seed {seed}")

        self._backpropagate(x, y, params)

        self._params = params
        logger.info(f"Training finished after {cfg.num_epochs} epochs")

    def _backpropagate(self, x: np.ndarray, y: np.ndarray, params: NetworkParameters) -> None:
        cfg = self.config
        lr = cfg.learning_rate

        for epoch in range(cfg.num_epochs):
            # Forward pass
            hidden_in, hidden_act, out_in, output = forward(x, params)

            network_error = y - output

            if cfg.strict_derivative:
                slope_output = sigmoid_prime(out_in)
                slope_hidden = sigmoid_prime(hidden_in)
            else:
                slope_output = sigmoid_prime(output)
                slope_hidden = sigmoid_prime(hidden_act)

            # Backward pass
            d_output = network_error * slope_output
            error_at_hidden = d_output @ params.w_out.T
            d_hidden = error_at_hidden * slope_hidden

            # Update weights
            params.w_out += lr * (hidden_act.T @ d_output)
            params.b_out += lr * sum_along_axis(0, d_output)
            params.w_hidden += lr * (x.T @ d_hidden)
            params.b_hidden += lr * sum_along_axis(0, d_hidden)

            if cfg.log_every and epoch % cfg.log_every == 0:
                loss = np.mean(network_error ** 2)
                logger.info(f"Epoch {epoch:4d} | Loss: {loss:.6f}")

    def predict(self, x) -> np.ndarray:
        params = self._params
        if params is None or params.w_hidden.size == 0 or params.w_out.size == 0:
            raise EmptyWeightsError()
        if params.b_hidden.size == 0 or params.b_out.size == 0:
            raise EmptyBiasesError()

        x = self._as_matrix(x, "x", self.config.input_neurons)
        _, _, _, output = forward(x, params)
        return output

    def load_parameters(self, params: NetworkParameters) -> None:
        """Install externally supplied parameters, e.g. restored from disk."""
        cfg = self.config
        expected = {
            "w_hidden": (cfg.input_neurons, cfg.hidden_neurons),
            "b_hidden": (1, cfg.hidden_neurons),
            "w_out": (cfg.hidden_neurons, cfg.output_neurons),
            "b_out": (1, cfg.output_neurons),
        }
        arrays = {}
        for name, shape in expected.items():
            value = np.asarray(getattr(params, name), dtype=float)
            # Empty matrices are left for predict to report
            if value.size and value.shape != shape:
                raise StructuralError(f"{name} must have shape {shape}, got {value.shape}")
            arrays[name] = value
        self._params = NetworkParameters(**arrays)
