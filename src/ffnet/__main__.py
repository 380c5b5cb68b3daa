#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import List, Optional

from ffnet.data import xor_dataset
from ffnet.models import create_xor_network

logger = logging.getLogger(__name__)

DEFAULT_NUM_EPOCHS = 10000
DEFAULT_LEARNING_RATE = 0.01
DEFAULT_THRESHOLD = 0.5
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"


def main(args: argparse.Namespace) -> int:
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    if args.seed is not None:
        logger.info("Using random seed: %d.", args.seed)

    x, y = xor_dataset()

    try:
        model = create_xor_network(seed=args.seed)
        model.fit(x,
                  y,
                  num_epochs=args.num_epochs,
                  eta=args.learning_rate,
                  verbose=not args.quiet)
    except (ValueError, RuntimeError) as e:
        logger.error("Failed to train model: %s.", e, exc_info=True)
        return 1

    for x_i, y_i in zip(x, y):
        probability = float(model.predict(x_i)[0])
        output = 1 if probability > args.threshold else 0

        print(f"Input: {x_i[0]:g}, {x_i[1]:g}")
        print(f"Output Probability: {probability}")
        print(f"Output: {output}")
        print(f"Expected Output: {y_i[0]:g}")
        print("----------------------")

    accuracy = model.evaluate(x, y, threshold=args.threshold)
    logger.info("Final accuracy on XOR: %.2f%%.", accuracy * 100)

    return 0


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Train a small feed-forward network on XOR.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    training_args = parser.add_argument_group("Training parameters")
    training_args.add_argument("--num-epochs",
                               type=int,
                               default=DEFAULT_NUM_EPOCHS,
                               help="Number of training epochs.")
    training_args.add_argument("--learning-rate",
                               type=float,
                               default=DEFAULT_LEARNING_RATE,
                               help="Gradient descent step size.")
    training_args.add_argument("--seed",
                               type=int,
                               default=None,
                               help="Random seed for weight initialization.")

    output_args = parser.add_argument_group("Output and logging configuration")
    output_args.add_argument("--threshold",
                             type=float,
                             default=DEFAULT_THRESHOLD,
                             help="Decision threshold for predictions.")
    output_args.add_argument("--quiet",
                             action="store_true",
                             help="Do not print per-epoch loss.")
    output_args.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level.")

    args = parser.parse_args(argv)

    if args.num_epochs <= 0:
        parser.error("--num-epochs must be positive.")

    if args.learning_rate <= 0:
        parser.error("--learning-rate must be positive.")

    if not 0.0 < args.threshold < 1.0:
        parser.error("--threshold must be between 0.0 and 1.0.")

    return args


def run() -> None:
    sys.exit(main(parse_arguments()))


if __name__ == "__main__":
    run()
