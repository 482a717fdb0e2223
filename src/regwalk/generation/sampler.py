"""Uniform integer sampling over inclusive ranges."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniform integers; :class:`random.Random` satisfies it."""

    def randrange(self, stop: int) -> int: ...


def sample(min_value: int, max_value: int, random_source: RandomSource) -> int:
    """Return an integer drawn uniformly from ``[min_value, max_value]``.

    Each call consumes exactly one ``randrange`` draw, so a source in a
    fixed state yields a fixed sequence for a fixed sequence of calls.

    Args:
        min_value: The minimum number (inclusive).
        max_value: The maximum number (inclusive).
        random_source: The object used as the randomizer.

    Raises:
        ValueError: If ``min_value > max_value``.
    """
    if min_value > max_value:
        raise ValueError(f"Empty range: min ({min_value}) > max ({max_value})")
    span = max_value - min_value + 1
    return random_source.randrange(span) + min_value


__all__ = ["RandomSource", "sample"]
