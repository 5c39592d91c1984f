from dataclasses import dataclass, asdict
from typing import Any, Dict


# ============================
# Configuration
# ============================
@dataclass(frozen=True)
class NetworkConfig:
    """Architecture and training parameters for a single-hidden-layer network"""
    input_neurons: int
    hidden_neurons: int
    output_neurons: int
    num_epochs: int
    learning_rate: float

    # Evaluate sigmoid' at the pre-activation instead of the activation
    strict_derivative: bool = False
    # Epoch interval for loss logging, 0 disables it
    log_every: int = 1000

    def __post_init__(self):
        for name in ("input_neurons", "hidden_neurons", "output_neurons", "num_epochs"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if isinstance(self.learning_rate, bool) or not isinstance(self.learning_rate, (int, float)):
            raise ValueError(f"learning_rate must be a number, got {self.learning_rate!r}")
        if not self.learning_rate > 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate!r}")

        if isinstance(self.log_every, bool) or not isinstance(self.log_every, int) or self.log_every < 0:
            raise ValueError(f"log_every must be a non-negative integer, got {self.log_every!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NetworkConfig":
        return cls(**data)
