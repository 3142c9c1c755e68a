"""Injectable randomness for the generators."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence, TypeVar, Union

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything exposing ``random() -> float`` in ``[0, 1)``.

    ``numpy.random.Generator`` satisfies this protocol directly, which is what
    :func:`make_rng` hands out by default.
    """

    def random(self) -> float:
        ...


class SequenceRandomSource:
    """Replays a fixed list of draws; raises once the script runs out.

    Used by tests that need exact control over every draw a generator makes.
    """

    def __init__(self, values: Iterable[float]):
        self._values = [float(v) for v in values]
        self._pos = 0
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"scripted draw {value!r} outside [0, 1)")

    @property
    def consumed(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos

    def random(self) -> float:
        if self._pos >= len(self._values):
            raise IndexError(f"scripted random source exhausted after {self._pos} draws")
        value = self._values[self._pos]
        self._pos += 1
        return value


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def draw(rng: RandomSource) -> float:
    return float(rng.random())


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Return ``low + u * (high - low)``; ``low == high`` still consumes a draw."""

    return low + draw(rng) * (high - low)


def randint(rng: RandomSource, high: int) -> int:
    """Integer in ``[0, high)`` from a single draw."""

    if high <= 0:
        raise ValueError("randint requires a positive upper bound")
    return min(int(draw(rng) * high), high - 1)


def coin(rng: RandomSource, p: float = 0.5) -> bool:
    return draw(rng) < p


def choice(rng: RandomSource, items: Sequence[T]) -> T:
    if not items:
        raise ValueError("cannot choose from an empty sequence")
    return items[randint(rng, len(items))]


def sign(rng: RandomSource) -> int:
    return 1 if coin(rng) else -1


RngLike = Union[RandomSource, np.random.Generator]

__all__ = [
    "RandomSource",
    "RngLike",
    "SequenceRandomSource",
    "choice",
    "coin",
    "draw",
    "make_rng",
    "randint",
    "sign",
    "uniform",
]
