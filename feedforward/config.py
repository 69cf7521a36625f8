from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class TrainingConfig:
    """Settings for one training run. Defaults reproduce the demo network."""

    layer_sizes: Tuple[int, ...] = (9, 4, 9)
    trials: int = 100
    learning_rate: float = 0.4
    seed: int | None = 1
    weight_min: float = -0.1
    weight_max: float = 0.1
    inputs: Tuple[float, ...] = field(default_factory=lambda: tuple(float(i) for i in range(1, 10)))
    expected: Tuple[float, ...] = (1.0, 0.0, 1.0, 0.0, 1.0, 0.0, 1.0, 0.0, 1.0)

    @property
    def weight_range(self) -> Tuple[float, float]:
        return (self.weight_min, self.weight_max)

    def validate(self) -> None:
        if len(self.layer_sizes) < 2:
            raise ValueError("At least two layer sizes are required")
        if any(size <= 0 for size in self.layer_sizes):
            raise ValueError(f"Layer sizes must be positive, got {list(self.layer_sizes)}")
        if self.trials <= 0:
            raise ValueError(f"Trial count must be positive, got {self.trials}")
        if self.learning_rate <= 0:
            raise ValueError(f"Learning rate must be positive, got {self.learning_rate}")
        if self.weight_min >= self.weight_max:
            raise ValueError(f"Weight range must satisfy min < max, got ({self.weight_min}, {self.weight_max})")
        if len(self.inputs) != self.layer_sizes[0]:
            raise ValueError(f"Expected {self.layer_sizes[0]} input values, got {len(self.inputs)}")
        if len(self.expected) != self.layer_sizes[-1]:
            raise ValueError(f"Expected {self.layer_sizes[-1]} target values, got {len(self.expected)}")
