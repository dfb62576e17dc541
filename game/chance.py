"""
Ecclesia - Chance Module

Randomness used by every selection in the game:
- Weighted pick over (value, weight) pairs
- Seeded Lehmer (Park-Miller) generator for reproducible draws
"""

from dataclasses import dataclass
from typing import Callable, Generic, List, Sequence, TypeVar

T = TypeVar("T")

Rng = Callable[[], float]

# Park-Miller minimal standard
MODULUS = 2147483647  # 2^31 - 1
MULTIPLIER = 16807


@dataclass(frozen=True)
class WeightedOption(Generic[T]):
    value: T
    weight: float


def pick_weighted(options: Sequence[WeightedOption[T]], rng: Rng) -> T:
    """
    Pick one option with probability proportional to its weight.

    The draw is scaled to [0, total) and the first option whose running
    weight reaches the threshold wins.

    Raises:
        ValueError: no options, or total weight <= 0 (malformed content)
    """
    if not options:
        raise ValueError("Cannot pick from an empty option list")

    total = sum(option.weight for option in options)
    if total <= 0:
        raise ValueError("Cannot pick option with non-positive total weight")

    threshold = rng() * total
    cumulative = 0.0

    for option in options:
        cumulative += option.weight
        if threshold < cumulative:
            return option.value

    # Float drift on the last bucket
    return options[-1].value


def create_seeded_rng(seed: int) -> Rng:
    """
    Lehmer generator over the Mersenne prime 2^31 - 1.

    Returns a callable yielding floats in the open interval (0, 1).
    Seeds of 0, negatives and multiples of the modulus are shifted into
    range instead of rejected.
    """
    value = seed % MODULUS
    if value <= 0:
        value += MODULUS - 1

    def next_value() -> float:
        nonlocal value
        value = (value * MULTIPLIER) % MODULUS
        return value / MODULUS

    return next_value


def pick_uniform(items: List[T], rng: Rng) -> T:
    """Uniform pick via floor(rng() * count)."""
    return items[int(rng() * len(items))]
