from dataclasses import dataclass
from typing import List, Sequence, Tuple

import structlog

from .linalg import VectorLike, as_vector
from .network import Network

logger = structlog.get_logger(__name__)

Sample = Tuple[VectorLike, VectorLike]


@dataclass(frozen=True)
class TrialStats:
    trial: int
    total_error: float


@dataclass(frozen=True)
class EpochStats:
    epoch: int
    total_error: float


def train(
    network: Network,
    inputs: VectorLike,
    expected: VectorLike,
    trials: int,
    learning_rate: float,
) -> List[TrialStats]:
    """Repeat set_input/fire/learn ``trials`` times on a single sample.

    The recorded error is the one seen by each trial before it learns.
    There is no convergence check; the loop always runs every trial.
    """
    if trials <= 0:
        raise ValueError(f"Trial count must be positive, got {trials}")
    if learning_rate <= 0:
        raise ValueError(f"Learning rate must be positive, got {learning_rate}")

    inputs = as_vector(inputs)
    expected = as_vector(expected)
    history: List[TrialStats] = []
    for trial in range(1, trials + 1):
        error = network.train_step(inputs, expected, learning_rate)
        history.append(TrialStats(trial=trial, total_error=error))
        logger.debug("trial_completed", trial=trial, total_error=error)

    logger.info(
        "training_finished",
        trials=trials,
        learning_rate=learning_rate,
        first_error=history[0].total_error,
        last_error=history[-1].total_error,
    )
    return history


def train_samples(
    network: Network,
    samples: Sequence[Sample],
    epochs: int,
    learning_rate: float,
) -> List[EpochStats]:
    """Cycle through ``samples`` one at a time for ``epochs`` passes.

    Each sample is still a single set_input/fire/learn step; nothing is
    batched or shuffled.
    """
    if not samples:
        raise ValueError("At least one sample is required")
    if epochs <= 0:
        raise ValueError(f"Epoch count must be positive, got {epochs}")
    if learning_rate <= 0:
        raise ValueError(f"Learning rate must be positive, got {learning_rate}")

    prepared = [(as_vector(x), as_vector(y)) for x, y in samples]
    history: List[EpochStats] = []
    for epoch in range(1, epochs + 1):
        epoch_error = 0.0
        for inputs, expected in prepared:
            epoch_error += network.train_step(inputs, expected, learning_rate)
        history.append(EpochStats(epoch=epoch, total_error=epoch_error))
        if epoch % 1000 == 0:
            logger.debug("epoch_completed", epoch=epoch, total_error=epoch_error)

    logger.info("training_finished", epochs=epochs, samples=len(prepared), last_error=history[-1].total_error)
    return history
