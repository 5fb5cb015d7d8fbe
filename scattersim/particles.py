"""Particles placed in space and systems of particles read from configuration files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable

from scattersim.geometry import ScatteringPoint, Transform, Vector3, dot_product
from scattersim.shapes import (
    Box,
    Cylinder,
    Ellipsoid,
    ParticleShape,
    Sphere,
    Spherocylinder,
    Superquadric,
    UniformSource,
)


class ConfigurationError(ValueError):
    """Raised when a configuration file or line cannot be understood."""


_SHAPES: dict[str, tuple[Callable[..., ParticleShape], tuple[float, ...]]] = {
    "SPH": (Sphere, (1.0,)),
    "CYL": (Cylinder, (1.0, 1.0)),
    "SPHCYL": (Spherocylinder, (1.0, 1.0)),
    "BOX": (Box, (1.0, 1.0, 1.0)),
    "ELL": (Ellipsoid, (1.0, 1.0, 1.0)),
    "SQUAD": (Superquadric, (1.0, 1.0, 1.0, 2.0, 2.0, 2.0)),
}

# Centre of mass followed by the rows of the orientation matrix.
_DEFAULT_POSE = (0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


def _floats(tokens: list[str]) -> list[float]:
    try:
        return [float(token) for token in tokens]
    except ValueError as exc:
        raise ConfigurationError(f"invalid number in {' '.join(tokens)!r}") from exc


@dataclass
class Particle:
    """A shape together with its position and orientation."""

    tf: Transform = field(default_factory=Transform)
    shape: ParticleShape = field(default_factory=ParticleShape)

    def generate_scattering_points(self, rho_sp: float, rng: UniformSource | None = None) -> list[ScatteringPoint]:
        """Draw scattering points inside the shape and move them into the lab frame."""
        columns = list(zip(*self.tf.rotation))
        placed = []
        for point in self.shape.generate_scattering_points(rho_sp, rng):
            cm: Vector3 = tuple(  # type: ignore[assignment]
                dot_product(column, point.cm) + centre for column, centre in zip(columns, self.tf.cm)
            )
            placed.append(ScatteringPoint(cm))
        return placed

    def molgl(self) -> str:
        """Return the molgl description of the particle, ending with a newline."""
        return self.shape.molgl(self.tf) + "\n"


def parse_particle(line: str) -> Particle:
    """Build a particle from a configuration line: type, shape sizes, centre and matrix rows."""
    tokens = line.split()
    if not tokens:
        raise ConfigurationError("empty particle line")
    kind, *rest = tokens
    try:
        factory, defaults = _SHAPES[kind]
    except KeyError:
        raise ConfigurationError(f"Unknown particle type: {kind}") from None

    values = _floats(rest)
    count = len(defaults)
    sizes = values[:count]
    shape = factory(*sizes, *defaults[len(sizes):])

    pose = values[count:count + len(_DEFAULT_POSE)]
    pose += _DEFAULT_POSE[len(pose):]
    cm = (pose[0], pose[1], pose[2])
    rotation = (
        (pose[3], pose[4], pose[5]),
        (pose[6], pose[7], pose[8]),
        (pose[9], pose[10], pose[11]),
    )
    return Particle(Transform(cm, rotation), shape)


class ParticleSystem:
    """A simulation box holding a collection of particles."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.particles: list[Particle] = []
        self.lbox: Vector3 = (1.0, 1.0, 1.0)
        if path is not None:
            self.load_system(path)

    @property
    def n(self) -> int:
        """Number of particles."""
        return len(self.particles)

    def add_particle(self, particle: Particle) -> None:
        """Append a particle to the system."""
        self.particles.append(particle)

    def load_system(self, path: str | os.PathLike[str]) -> None:
        """Read the box size from the first line and one particle from each further line."""
        with open(path, encoding="utf-8") as file_in:
            lines = file_in.read().splitlines()
        if not lines:
            return

        box = _floats(lines[0].split()[:3])
        self.lbox = tuple(box + list(self.lbox[len(box):]))  # type: ignore[assignment]

        for lineno, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            try:
                self.add_particle(parse_particle(line))
            except ConfigurationError as exc:
                raise ConfigurationError(f"{os.fspath(path)}:{lineno}: {exc}") from exc

    def write_molgl(self, filename: str | os.PathLike[str], append: bool = False) -> None:
        """Write the molgl description of every particle, replacing or extending the file."""
        with open(filename, "a" if append else "w", encoding="utf-8") as file_out:
            file_out.writelines(particle.molgl() for particle in self.particles)