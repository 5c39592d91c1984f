from .activations import sigmoid, sigmoid_prime
from .config import NetworkConfig
from .errors import EmptyBiasesError, EmptyWeightsError, NetworkError, StructuralError
from .network import NetworkParameters, NeuralNetwork, forward, sum_along_axis
from .persistence import load_network, save_network

__all__ = [
    "sigmoid",
    "sigmoid_prime",
    "NetworkConfig",
    "NetworkError",
    "EmptyWeightsError",
    "EmptyBiasesError",
    "StructuralError",
    "NetworkParameters",
    "NeuralNetwork",
    "forward",
    "sum_along_axis",
    "save_network",
    "load_network",
]

__version__ = "0.1.0"
