class NetworkError(Exception):
    """Base class for errors raised by the network."""


class EmptyWeightsError(NetworkError):
    def __init__(self, message: str = "the supplied weights are empty"):
        super().__init__(message)


class EmptyBiasesError(NetworkError):
    def __init__(self, message: str = "the supplied biases are empty"):
        super().__init__(message)


class StructuralError(NetworkError):
    """A matrix has the wrong shape for the requested operation."""
