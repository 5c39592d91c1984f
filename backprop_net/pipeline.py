import argparse
import logging
import sys
from dataclasses import dataclass, asdict
from typing import Optional, Tuple

import numpy as np
import pandas as pd
from sklearn.metrics import accuracy_score
from sklearn.model_selection import train_test_split

from .config import NetworkConfig
from .errors import NetworkError
from .network import NeuralNetwork
from .persistence import save_network

logger = logging.getLogger(__name__)


# ============================
# Configuration
# ============================
@dataclass(frozen=True)
class PipelineConfig:
    data_path: str = "data/iris.csv"
    num_labels: int = 3
    hidden_neurons: int = 3
    num_epochs: int = 5000
    learning_rate: float = 0.3
    test_size: float = 0.2
    random_state: int = 42
    seed: Optional[int] = None
    log_every: int = 1000
    model_dir: Optional[str] = None
    log_file: Optional[str] = None

    def to_dict(self):
        return asdict(self)


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO) -> None:
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )


# ============================
# Data
# ============================
def load_dataset(path: str, num_labels: int) -> Tuple[np.ndarray, np.ndarray]:
    """Read a CSV whose last ``num_labels`` columns are one-hot targets."""
    df = pd.read_csv(path)
    if num_labels <= 0 or num_labels >= df.shape[1]:
        raise ValueError(
            f"num_labels must be between 1 and {df.shape[1] - 1} for {path}, got {num_labels}"
        )

    X = df.iloc[:, :-num_labels].to_numpy(dtype=float)
    y = df.iloc[:, -num_labels:].to_numpy(dtype=float)
    logger.info(f"Loaded {len(df)} rows from {path}: X shape {X.shape}, y shape {y.shape}")
    return X, y


# ============================
# Evaluation
# ============================
def evaluate_accuracy(predictions: np.ndarray, labels: np.ndarray) -> float:
    """Fraction of rows whose highest-scoring output matches the one-hot label"""
    return float(accuracy_score(np.argmax(labels, axis=1), np.argmax(predictions, axis=1)))


def run_pipeline(cfg: PipelineConfig) -> Tuple[NeuralNetwork, float]:
    X, y = load_dataset(cfg.data_path, cfg.num_labels)
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=cfg.test_size, random_state=cfg.random_state
    )
    logger.info(f"Train: {X_train.shape}, Test: {X_test.shape}")

    net_config = NetworkConfig(
        input_neurons=X.shape[1],
        hidden_neurons=cfg.hidden_neurons,
        output_neurons=y.shape[1],
        num_epochs=cfg.num_epochs,
        learning_rate=cfg.learning_rate,
        log_every=cfg.log_every,
    )
    network = NeuralNetwork(net_config, seed=cfg.seed)
    network.train(X_train, y_train)

    accuracy = evaluate_accuracy(network.predict(X_test), y_test)
    logger.info(f"Test Accuracy: {accuracy:.4f}")

    if cfg.model_dir:
        save_network(network, cfg.model_dir)

    return network, accuracy


# ============================
# Main Execution
# ============================
def parse_args(argv=None) -> PipelineConfig:
    defaults = PipelineConfig()
    parser = argparse.ArgumentParser(
        description="Train a two-layer sigmoid network on a CSV dataset",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("data_path", type=str, help="CSV file, one-hot labels in the last columns")
    parser.add_argument("--labels", dest="num_labels", type=int, default=defaults.num_labels)
    parser.add_argument("--hidden", dest="hidden_neurons", type=int, default=defaults.hidden_neurons)
    parser.add_argument("--epochs", dest="num_epochs", type=int, default=defaults.num_epochs)
    parser.add_argument("--lr", dest="learning_rate", type=float, default=defaults.learning_rate)
    parser.add_argument("--test_size", type=float, default=defaults.test_size)
    parser.add_argument("--random_state", type=int, default=defaults.random_state)
    parser.add_argument("--seed", type=int, default=None, help="Seed for weight initialization")
    parser.add_argument("--log_every", type=int, default=defaults.log_every)
    parser.add_argument("--model_dir", type=str, default=None, help="Save the trained network here")
    parser.add_argument("--log_file", type=str, default=None)
    args = parser.parse_args(argv)
    return PipelineConfig(**vars(args))


def main(argv=None) -> int:
    cfg = parse_args(argv)
    setup_logging(cfg.log_file)
    logger.info("Starting training pipeline...")

    try:
        _, accuracy = run_pipeline(cfg)
    except (NetworkError, ValueError, FileNotFoundError) as e:
        logger.error(f"Training failed: {e}")
        return 1

    print(f"Accuracy = {accuracy:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
