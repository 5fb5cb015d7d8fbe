"""Basic geometric types, vector helpers, random numbers and box output."""

from __future__ import annotations

import math
import os
import random
import time
from dataclasses import dataclass, field
from typing import Sequence

Vector3 = tuple[float, float, float]
Matrix3 = tuple[Vector3, Vector3, Vector3]


def _identity() -> Matrix3:
    return ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def _to_string(value: float) -> str:
    """Format a number with six decimals, as fixed-point text output does."""
    return f"{value:.6f}"


@dataclass
class Transform:
    """Position (centre of mass) and orientation matrix of a body."""

    cm: Vector3 = (0.0, 0.0, 0.0)
    rotation: Matrix3 = field(default_factory=_identity)


@dataclass
class ScatteringPoint:
    """A single point scatterer."""

    cm: Vector3 = (0.0, 0.0, 0.0)

    def cogli2(self, lbox: Sequence[float]) -> str:
        """Return a cogli2 sphere line for this point, shifted into the box."""
        radius = 0.1
        color = "blue"
        coords = " ".join(_to_string(c + 0.5 * length) for c, length in zip(self.cm, lbox))
        return f"{coords} @ {_to_string(radius)} C[{color}]\n"


class Random:
    """Uniform random number source, seeded from the clock and the OS by default."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.monotonic_ns() ^ int.from_bytes(os.urandom(28), "little")
        self._generator = random.Random(seed)

    def random(self) -> float:
        """Return a number uniformly drawn from [0, 1)."""
        return self._generator.random()

    def uniform(self, a: float, b: float) -> float:
        """Return a number uniformly drawn between a and b."""
        return self._generator.uniform(a, b)


def sgn(val: float) -> int:
    """Sign of a number: -1 for negative, +1 for positive, 0 for zero."""
    return (val > 0) - (val < 0)


def vector_norm(vec: Sequence[float]) -> float:
    """Euclidean norm of a 3-vector."""
    return math.sqrt(vec[0] * vec[0] + vec[1] * vec[1] + vec[2] * vec[2])


def dot_product(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Dot product of two 3-vectors."""
    return vec1[0] * vec2[0] + vec1[1] * vec2[1] + vec1[2] * vec2[2]


def write_box(lbox: Sequence[float], filename: str | os.PathLike[str]) -> None:
    """Write the simulation box definition of a cogli2 file, replacing its content."""
    with open(filename, "w", encoding="utf-8") as file_out:
        file_out.write(f".Box: {lbox[0]:.16f},{lbox[1]:.16f},{lbox[2]:.16f}\n")