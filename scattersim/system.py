"""The ensemble of scattering points built from a system of particles."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from scattersim.geometry import ScatteringPoint
from scattersim.particles import Particle
from scattersim.rho import Rho1D, Rho2D
from scattersim.settings import ScattType, SimType
from scattersim.shapes import UniformSource


@dataclass
class ScatteringSystem:
    """Scattering points of a configuration and the density transforms computed from them."""

    scatt_type: ScattType = ScattType.SQ
    rho_sp: float = 1.0
    nsp: int = 0
    scattering_points: list[ScatteringPoint] = field(default_factory=list)
    sim_type: SimType = SimType.ONE_DIM
    vec_rho1d: list[Rho1D] = field(default_factory=list)
    rho2d: Rho2D = field(default_factory=Rho2D)
    cogli2_max_spheres: int = 100000
    rng: UniformSource | None = field(default=None, repr=False)

    def generate_scattering_points(self, particles: Iterable[Particle]) -> None:
        """Add one point per particle centre (Sq) or points filling each particle (Iq)."""
        for particle in particles:
            if self.scatt_type is ScattType.SQ:
                self.scattering_points.append(ScatteringPoint(particle.tf.cm))
                self.nsp += 1
            else:
                points = particle.generate_scattering_points(self.rho_sp, self.rng)
                self.scattering_points.extend(points)
                self.nsp += len(points)

    def write_cogli2(
        self, lbox: Sequence[float], filename: str | os.PathLike[str], append: bool = False
    ) -> None:
        """Write up to cogli2_max_spheres points as cogli2 spheres, replacing or extending the file."""
        with open(filename, "a" if append else "w", encoding="utf-8") as file_out:
            for point in self.scattering_points[: self.cogli2_max_spheres]:
                file_out.write(point.cogli2(lbox))