"""Particle shapes: volumes, scattering point sampling and molgl output."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol

from scattersim.geometry import Random, ScatteringPoint, Transform, Vector3, vector_norm

_SHARED_RNG = Random()


class UniformSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


def _fmt(value: float) -> str:
    return f"{value:.6f}"


class ParticleShape:
    """Base shape: no volume and no scattering points."""

    def describe(self) -> str:
        """Human-readable description of the shape."""
        return "Base class of ParticleShape"

    def volume(self) -> float:
        """Volume used to decide how many scattering points to draw."""
        return 0.0

    def generate_scattering_points(self, rho_sp: float, rng: UniformSource | None = None) -> list[ScatteringPoint]:
        """Draw scattering points uniformly inside the shape, in its own frame."""
        return []

    def molgl(self, tf: Transform) -> str:
        """Return the molgl description of the shape placed by tf."""
        return ""

    def _point_count(self, rho_sp: float) -> int:
        return max(int(rho_sp * self.volume()), 0)

    def _sample(
        self,
        rho_sp: float,
        rng: UniformSource | None,
        propose: Callable[[UniformSource], Vector3],
        accept: Callable[[Vector3], bool],
    ) -> list[ScatteringPoint]:
        source = rng if rng is not None else _SHARED_RNG
        points = []
        for _ in range(self._point_count(rho_sp)):
            while True:
                cm = propose(source)
                if accept(cm):
                    break
            points.append(ScatteringPoint(cm))
        return points


@dataclass
class Sphere(ParticleShape):
    """Sphere of a given diameter."""

    diameter: float = 1.0

    @property
    def radius(self) -> float:
        return 0.5 * self.diameter

    def describe(self) -> str:
        return f"Sphere: D = {self.diameter:g}, R = {self.radius:g}"

    def volume(self) -> float:
        return (4.0 * math.pi / 3.0) * self.radius**3

    def generate_scattering_points(self, rho_sp: float, rng: UniformSource | None = None) -> list[ScatteringPoint]:
        r = self.radius

        def propose(source: UniformSource) -> Vector3:
            return (source.uniform(-r, r), source.uniform(-r, r), source.uniform(-r, r))

        return self._sample(rho_sp, rng, propose, lambda cm: vector_norm(cm) <= r)


@dataclass
class Cylinder(ParticleShape):
    """Cylinder along the z axis."""

    diameter: float = 1.0
    length: float = 1.0

    @property
    def radius(self) -> float:
        return 0.5 * self.diameter

    @property
    def half_length(self) -> float:
        return 0.5 * self.length

    def describe(self) -> str:
        return (
            f"Cylinder: D = {self.diameter:g}, R = {self.radius:g}, "
            f"L = {self.length:g}, L2 = {self.half_length:g}"
        )

    def volume(self) -> float:
        return math.pi * self.radius**2 * self.length

    def generate_scattering_points(self, rho_sp: float, rng: UniformSource | None = None) -> list[ScatteringPoint]:
        r, l2 = self.radius, self.half_length

        def propose(source: UniformSource) -> Vector3:
            return (source.uniform(-r, r), source.uniform(-r, r), source.uniform(-l2, l2))

        return self._sample(rho_sp, rng, propose, lambda cm: math.hypot(cm[0], cm[1]) <= r)


@dataclass
class Spherocylinder(ParticleShape):
    """Cylinder along z capped by two hemispheres."""

    diameter: float = 1.0
    length: float = 1.0

    @property
    def radius(self) -> float:
        return 0.5 * self.diameter

    @property
    def half_length(self) -> float:
        return 0.5 * self.length

    def describe(self) -> str:
        return (
            f"Spherocylinder: D = {self.diameter:g}, R = {self.radius:g}, "
            f"L = {self.length:g}, L2 = {self.half_length:g}"
        )

    def volume(self) -> float:
        r = self.radius
        return (4.0 * math.pi / 3.0) * r**3 + math.pi * r * r * self.length

    def generate_scattering_points(self, rho_sp: float, rng: UniformSource | None = None) -> list[ScatteringPoint]:
        r, l2 = self.radius, self.half_length

        def propose(source: UniformSource) -> Vector3:
            return (
                source.uniform(-r, r),
                source.uniform(-r, r),
                source.uniform(-(r + l2), r + l2),
            )

        def accept(cm: Vector3) -> bool:
            x, y, z = cm
            if abs(z) <= l2:
                return math.hypot(x, y) <= r
            cap_z = z - l2 if z > l2 else z + l2
            return math.sqrt(x * x + y * y + cap_z * cap_z) <= r

        return self._sample(rho_sp, rng, propose, accept)

    def molgl(self, tf: Transform) -> str:
        axis = tf.rotation[2]
        r, l2 = self.radius, self.half_length

        body = " ".join(_fmt(v) for v in (*tf.cm, *axis))
        lines = [f"{body} @ {_fmt(r)} {_fmt(self.length)} C[purple]"]
        for sign in (-1.0, 1.0):
            centre = " ".join(_fmt(c + sign * l2 * u) for c, u in zip(tf.cm, axis))
            lines.append(f"{centre} @ {_fmt(r)} C[purple]")
        return "\n".join(lines)


@dataclass
class Box(ParticleShape):
    """Rectangular box with full edge lengths a, b, c."""

    a: float = 1.0
    b: float = 1.0
    c: float = 1.0

    @property
    def axes(self) -> Vector3:
        return (self.a, self.b, self.c)

    @property
    def semi_axes(self) -> Vector3:
        return (0.5 * self.a, 0.5 * self.b, 0.5 * self.c)

    def describe(self) -> str:
        return f"Box: a = {self.a:g}, b = {self.b:g}, c = {self.c:g}"

    def volume(self) -> float:
        return self.a * self.b * self.c

    def generate_scattering_points(self, rho_sp: float, rng: UniformSource | None = None) -> list[ScatteringPoint]:
        semi = self.semi_axes

        def propose(source: UniformSource) -> Vector3:
            return tuple(source.uniform(-s, s) for s in semi)  # type: ignore[return-value]

        return self._sample(rho_sp, rng, propose, lambda cm: True)

    def molgl(self, tf: Transform) -> str:
        values = [*tf.cm, *(v for row in tf.rotation for v in row)]
        head = " ".join(_fmt(v) for v in values)
        sizes = " ".join(_fmt(v) for v in self.axes)
        return f"{head} B {sizes} C[purple]"


@dataclass
class Ellipsoid(ParticleShape):
    """Ellipsoid with semi-axes a, b, c."""

    a: float = 0.5
    b: float = 0.5
    c: float = 0.5

    @property
    def semi_axes(self) -> Vector3:
        return (self.a, self.b, self.c)

    def describe(self) -> str:
        return f"Ellipsoid: a = {self.a:g}, b = {self.b:g}, c = {self.c:g}"

    def volume(self) -> float:
        return (4.0 * math.pi / 3.0) * self.a * self.b * self.c

    def generate_scattering_points(self, rho_sp: float, rng: UniformSource | None = None) -> list[ScatteringPoint]:
        semi = self.semi_axes

        def propose(source: UniformSource) -> Vector3:
            return tuple(source.uniform(-s, s) for s in semi)  # type: ignore[return-value]

        def accept(cm: Vector3) -> bool:
            return sum(x * x / (s * s) for x, s in zip(cm, semi)) <= 1

        return self._sample(rho_sp, rng, propose, accept)


@dataclass
class Superquadric(ParticleShape):
    """Superquadric |x/a|^r + |y/b|^s + |z/c|^t <= 1."""

    a: float = 0.5
    b: float = 0.5
    c: float = 0.5
    r: float = 2.0
    s: float = 2.0
    t: float = 2.0

    @property
    def semi_axes(self) -> Vector3:
        return (self.a, self.b, self.c)

    @property
    def exponents(self) -> Vector3:
        return (self.r, self.s, self.t)

    def describe(self) -> str:
        return (
            "Superquadric:\n"
            f"Semiaxes: A = {self.a:g}, B = {self.b:g}, C = {self.c:g}\n"
            f"Exponents: r = {self.r:g}, s = {self.s:g}, t = {self.t:g}"
        )

    def volume(self) -> float:
        """Volume of the bounding box of the particle."""
        return 8.0 * self.a * self.b * self.c

    def generate_scattering_points(self, rho_sp: float, rng: UniformSource | None = None) -> list[ScatteringPoint]:
        semi = self.semi_axes
        exps = self.exponents

        def propose(source: UniformSource) -> Vector3:
            return tuple(source.uniform(-s, s) for s in semi)  # type: ignore[return-value]

        def accept(cm: Vector3) -> bool:
            return sum(abs(x / s) ** e for x, s, e in zip(cm, semi, exps)) <= 1

        return self._sample(rho_sp, rng, propose, accept)