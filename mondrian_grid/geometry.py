"""Rectangle value types shared by the generators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

BlockMode = Literal["equalHeight", "equalWidth"]

EQUAL_HEIGHT: BlockMode = "equalHeight"
EQUAL_WIDTH: BlockMode = "equalWidth"

# Absolute slack for containment checks; coordinates are sums of floats.
CONTAINMENT_EPS = 1e-9


def opposite_mode(mode: BlockMode) -> BlockMode:
    return EQUAL_WIDTH if mode == EQUAL_HEIGHT else EQUAL_HEIGHT


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.w * 0.5, self.y + self.h * 0.5)

    def contains(self, other: "Rect", eps: float = CONTAINMENT_EPS) -> bool:
        """Return ``True`` when ``other`` lies inside this rectangle."""

        return (
            other.x >= self.x - eps
            and other.y >= self.y - eps
            and other.right <= self.right + eps
            and other.bottom <= self.bottom + eps
        )

    def overlaps(self, other: "Rect", eps: float = CONTAINMENT_EPS) -> bool:
        """Return ``True`` when the interiors intersect."""

        return (
            self.x < other.right - eps
            and other.x < self.right - eps
            and self.y < other.bottom - eps
            and other.y < self.bottom - eps
        )


@dataclass(frozen=True)
class Block:
    """A coloured strip placed inside a cell (or inside another block)."""

    rect: Rect
    color: str
    mode: BlockMode
    row: int
    col: int


__all__ = [
    "Block",
    "BlockMode",
    "CONTAINMENT_EPS",
    "EQUAL_HEIGHT",
    "EQUAL_WIDTH",
    "Rect",
    "opposite_mode",
]
