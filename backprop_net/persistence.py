import json
import logging
from pathlib import Path

import joblib

from .config import NetworkConfig
from .errors import EmptyWeightsError
from .network import NetworkParameters, NeuralNetwork

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"
PARAMETERS_FILE = "parameters.pkl"


def save_network(network: NeuralNetwork, path: str = "models/backprop_net") -> Path:
    """Save config and trained parameters of a network to a directory"""
    if not network.is_trained:
        raise EmptyWeightsError("cannot save a network that has not been trained")
    params = network.parameters

    out_dir = Path(path)
    out_dir.mkdir(parents=True, exist_ok=True)

    with open(out_dir / CONFIG_FILE, 'w') as f:
        json.dump(network.config.to_dict(), f, indent=2)

    joblib.dump({
        "w_hidden": params.w_hidden,
        "b_hidden": params.b_hidden,
        "w_out": params.w_out,
        "b_out": params.b_out,
    }, out_dir / PARAMETERS_FILE)

    logger.info(f"Saved network to {out_dir}")
    return out_dir


def load_network(path: str = "models/backprop_net") -> NeuralNetwork:
    """Rebuild a trained network from a directory written by save_network"""
    in_dir = Path(path)

    with open(in_dir / CONFIG_FILE, 'r') as f:
        config = NetworkConfig.from_dict(json.load(f))

    arrays = joblib.load(in_dir / PARAMETERS_FILE)

    network = NeuralNetwork(config)
    network.load_parameters(NetworkParameters(**arrays))
    logger.info(f"Loaded network from {in_dir}")
    return network
