"""Command-line tokens and interactive base dimension input."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from loguru import logger

from ._shapes import accepted_dimension_counts
from ._solver import BaseSpec

DIMENSIONS_PROMPT = "Enter the base dimensions separated by spaces: "


class UsageError(ValueError):
    """Invalid command-line arguments. Not recoverable by re-prompting."""


@dataclass(frozen=True)
class Invocation:
    """Parsed command-line tokens."""

    side_count: int
    height: float
    inline_dimensions: tuple[float, ...] | None  # None if absent or not numeric


def parse_dimensions(line: str) -> tuple[float, ...]:
    """
    Parse a line of whitespace-separated real numbers.

    Raises:
        ValueError: If any token is not a real number
    """
    values = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            raise ValueError(f"Not a number: '{token}'") from None
    return tuple(values)


def parse_arguments(tokens: Sequence[str]) -> Invocation:
    """
    Parse `SIDES [DIMS...] HEIGHT`.

    The first token is the side count and the last is the height. Tokens in
    between are taken as base dimensions when they are all numeric.

    Raises:
        UsageError: If fewer than 3 tokens are given, or the side count or
            height is invalid
    """
    if len(tokens) < 3:
        raise UsageError(
            f"Insufficient number of arguments provided: expected at least 3, "
            f"got {len(tokens)}"
        )

    try:
        side_count = int(tokens[0])
    except ValueError:
        raise UsageError(f"Side count must be an integer, got '{tokens[0]}'") from None
    if side_count < 3:
        raise UsageError(f"Side count must be at least 3, got {side_count}")

    try:
        height = float(tokens[-1])
    except ValueError:
        raise UsageError(f"Height must be a number, got '{tokens[-1]}'") from None
    if not (math.isfinite(height) and height > 0):
        raise UsageError(f"Height must be a positive number, got {height}")

    try:
        inline = parse_dimensions(" ".join(tokens[1:-1]))
    except ValueError as e:
        logger.debug(f"Ignoring inline base dimensions: {e}")
        inline = None

    return Invocation(side_count=side_count, height=height, inline_dimensions=inline)


def build_base_spec(invocation: Invocation, dimensions: Sequence[float]) -> BaseSpec:
    """Combine parsed arguments with base dimensions.

    Raises:
        ValueError: If the dimensions do not fit the side count
    """
    return BaseSpec(
        side_count=invocation.side_count,
        dimensions=tuple(dimensions),
        height=invocation.height,
    )


def read_base_spec(
    invocation: Invocation,
    prompt: Callable[[str], str] | None = None,
) -> BaseSpec:
    """
    Build a BaseSpec, prompting for base dimensions until they are valid.

    Inline dimensions from the command line are used when they are valid.

    Args:
        invocation: Parsed command-line arguments
        prompt: Reads one line of input after showing a prompt. Defaults to
            the built-in input().

    Returns:
        Validated BaseSpec

    Raises:
        EOFError: If input ends before valid dimensions were entered
    """
    if prompt is None:
        prompt = input

    if invocation.inline_dimensions:
        try:
            return build_base_spec(invocation, invocation.inline_dimensions)
        except ValueError as e:
            logger.warning(f"Ignoring command-line base dimensions: {e}")

    accepted = accepted_dimension_counts(invocation.side_count)
    logger.debug(
        f"Expecting {' or '.join(str(n) for n in accepted)} dimensions "
        f"for {invocation.side_count} sides"
    )

    while True:
        line = prompt(DIMENSIONS_PROMPT)
        try:
            dimensions = parse_dimensions(line)
            return build_base_spec(invocation, dimensions)
        except ValueError as e:
            logger.warning(f"{e}. Please try again.")
