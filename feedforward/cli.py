import argparse
import random
from typing import List, Sequence

import numpy as np
import structlog

from .config import TrainingConfig
from .network import Network
from .trainer import train, train_samples

XOR_SAMPLES = [
    ((0.0, 0.0), (0.0,)),
    ((0.0, 1.0), (1.0,)),
    ((1.0, 0.0), (1.0,)),
    ((1.0, 1.0), (0.0,)),
]


def configure_logging(verbose: bool = False) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger("DEBUG" if verbose else "INFO"),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _float_list(text: str) -> List[float]:
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected comma separated numbers, got {text!r}") from exc


def _int_list(text: str) -> List[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected comma separated integers, got {text!r}") from exc


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    defaults = TrainingConfig()
    parser = argparse.ArgumentParser(description="Train a small feed-forward network with backpropagation.")
    parser.add_argument("--sizes", type=_int_list, default=list(defaults.layer_sizes), help="Comma separated layer sizes.")
    parser.add_argument("--trials", type=int, default=defaults.trials, help="Number of training iterations.")
    parser.add_argument("--learning-rate", type=float, default=defaults.learning_rate, help="Gradient descent step size.")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Random seed for weight initialization.")
    parser.add_argument("--weight-min", type=float, default=defaults.weight_min, help="Lower bound of initial weights.")
    parser.add_argument("--weight-max", type=float, default=defaults.weight_max, help="Upper bound of initial weights.")
    parser.add_argument("--input", type=_float_list, default=list(defaults.inputs), help="Comma separated input vector.")
    parser.add_argument("--expected", type=_float_list, default=list(defaults.expected), help="Comma separated target vector.")
    parser.add_argument("--xor", action="store_true", help="Train a 2-H-1 network on the XOR table instead. Uses --hidden, --epochs, --learning-rate, --seed and the weight range; --sizes, --trials, --input and --expected do not apply.")
    parser.add_argument("--hidden", type=int, default=3, help="Hidden layer size used with --xor.")
    parser.add_argument("--epochs", type=int, default=5000, help="Passes over the XOR table used with --xor.")
    parser.add_argument("--verbose", action="store_true", help="Log every training step.")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> TrainingConfig:
    config = TrainingConfig(
        layer_sizes=tuple(args.sizes),
        trials=args.trials,
        learning_rate=args.learning_rate,
        seed=args.seed,
        weight_min=args.weight_min,
        weight_max=args.weight_max,
        inputs=tuple(args.input),
        expected=tuple(args.expected),
    )
    config.validate()
    return config


def print_network(network: Network, expected: Sequence[float]) -> None:
    output = network.output_layer_values
    for target, value in zip(expected, output):
        print(f"{target} -> {value:.5f}")
    print("-----------------")
    print(f"Error    {network.total_error(np.asarray(expected, dtype=float)):.5f}")
    print()

    for index in range(network.depth - 1):
        print(f"Layer {index} -> {index + 1} (last row is bias)")
        print(network.format_layer_weights(index))
        print()


def validate_xor_args(args: argparse.Namespace) -> None:
    if args.hidden <= 0:
        raise ValueError(f"--hidden must be positive, got {args.hidden}")
    if args.epochs <= 0:
        raise ValueError(f"--epochs must be positive, got {args.epochs}")
    if args.learning_rate <= 0:
        raise ValueError(f"--learning-rate must be positive, got {args.learning_rate}")
    if args.weight_min >= args.weight_max:
        raise ValueError(f"Weight range must satisfy min < max, got ({args.weight_min}, {args.weight_max})")


def run_xor(args: argparse.Namespace) -> None:
    network = Network([2, args.hidden, 1], random.Random(args.seed), (args.weight_min, args.weight_max))
    stats = train_samples(network, XOR_SAMPLES, epochs=args.epochs, learning_rate=args.learning_rate)
    print(f"Final epoch error: {stats[-1].total_error:.5f}")
    for inputs, expected in XOR_SAMPLES:
        network.set_input(inputs)
        network.fire()
        print(f"{inputs} -> {network.output_layer_values[0]:.3f} (expected {expected[0]})")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if args.xor:
        try:
            validate_xor_args(args)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        run_xor(args)
        return

    try:
        config = config_from_args(args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    network = Network(config.layer_sizes, random.Random(config.seed), config.weight_range)
    train(network, config.inputs, config.expected, trials=config.trials, learning_rate=config.learning_rate)
    print_network(network, config.expected)


if __name__ == "__main__":
    main()
