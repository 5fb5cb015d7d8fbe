"""Fourier transforms of the microscopic density along lines and planes of q."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from scattersim.geometry import ScatteringPoint, Vector3
from scattersim.progress import ProgressBar


def _empty_grid() -> np.ndarray:
    return np.zeros((0, 0), dtype=complex)


@dataclass
class ScatteringVector:
    """A line of q values along a fixed direction."""

    dq: float = 0.01
    qmin: float = 0.0
    qmax: float = 1.0
    qqmax: int = 100
    q_axis: Vector3 = (1.0, 0.0, 0.0)
    q_values: list[float] = field(default_factory=list)

    def build_q_values(self) -> list[float]:
        """Fill q_values from qmin in steps of dq, stopping before qmax."""
        self.qqmax = max(int((self.qmax - self.qmin) / self.dq), 0)
        self.q_values = [self.qmin + qq * self.dq for qq in range(self.qqmax)]
        return self.q_values


@dataclass
class Rho1D:
    """Density amplitude rho(q) = sum_j exp(-i q (u . r_j)) along one direction u."""

    q_vector: ScatteringVector = field(default_factory=ScatteringVector)
    rho: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=complex))
    show_progress: bool = True

    def calculate_rho(self, points: Sequence[ScatteringPoint]) -> np.ndarray:
        """Add the contribution of the points to rho and return it."""
        if not self.q_vector.q_values:
            self.q_vector.build_q_values()
        q_values = np.asarray(self.q_vector.q_values, dtype=float)
        if self.rho.shape != q_values.shape:
            self.rho = np.zeros(q_values.shape, dtype=complex)

        coords = np.array([p.cm for p in points], dtype=float).reshape(-1, 3)
        projections = coords @ np.asarray(self.q_vector.q_axis, dtype=float)

        total = len(q_values)
        print_step = max(int(total / 100.0), 1)
        bar = ProgressBar() if self.show_progress else None

        for qq, q in enumerate(q_values):
            self.rho[qq] += np.exp(-1j * projections * q).sum()
            if bar is not None and qq % print_step == 0:
                bar.set_progress(100.0 * qq / total)
                bar.update()
        return self.rho

    def intensity(self, nsp: int) -> np.ndarray:
        """|rho(q)|^2 normalised by the number of scattering points."""
        return np.abs(self.rho) ** 2 / float(nsp)

    def export_data(self, nsp: int, filename: str | os.PathLike[str]) -> None:
        """Write 'q I(q)' lines."""
        with open(filename, "w", encoding="utf-8") as file_out:
            for q, value in zip(self.q_vector.q_values, self.intensity(nsp)):
                file_out.write(f"{q:g} {value:g}\n")


@dataclass
class Rho2D:
    """Density amplitude on a plane of q spanned by two coordinate axes, in four quadrants."""

    qmin: Vector3 = (0.0, 0.0, 0.0)
    dq: Vector3 = (0.01, 0.01, 0.01)
    qqmax: tuple[int, int, int] = (100, 100, 100)
    axis1: int = 0
    axis2: int = 1
    pos_pos: np.ndarray = field(default_factory=_empty_grid)
    pos_neg: np.ndarray = field(default_factory=_empty_grid)
    neg_pos: np.ndarray = field(default_factory=_empty_grid)
    neg_neg: np.ndarray = field(default_factory=_empty_grid)

    def initialize(self, dq: Sequence[float], qmin: Sequence[float], qqmax: Sequence[int]) -> None:
        """Set the grid and reset the four quadrants to zero."""
        self.dq = tuple(dq)  # type: ignore[assignment]
        self.qmin = tuple(qmin)  # type: ignore[assignment]
        self.qqmax = tuple(int(n) for n in qqmax)  # type: ignore[assignment]
        shape = (self.qqmax[self.axis1], self.qqmax[self.axis2])
        self.pos_pos = np.zeros(shape, dtype=complex)
        self.pos_neg = np.zeros(shape, dtype=complex)
        self.neg_pos = np.zeros(shape, dtype=complex)
        self.neg_neg = np.zeros(shape, dtype=complex)

    def calculate_conjugates(self) -> None:
        """Fill the negative quadrants from the positive ones: rho(-q) = conj(rho(q))."""
        self.neg_neg = np.conj(self.pos_pos)
        self.neg_pos = np.conj(self.pos_neg)

    def export_data(self, nsp: int, filename: str | os.PathLike[str]) -> None:
        """Write 'q1 q2 I' lines for the four quadrants, a blank line after each row."""
        d1, d2 = self.dq[self.axis1], self.dq[self.axis2]
        m1, m2 = self.qmin[self.axis1], self.qmin[self.axis2]
        quadrants = (
            (self.pos_pos, lambda i: m1 + d1 * i, lambda j: m2 + d2 * j),
            (self.pos_neg, lambda i: d1 * i, lambda j: -d2 * j),
            (self.neg_pos, lambda i: -d1 * i, lambda j: d2 * j),
            (self.neg_neg, lambda i: -d1 * i, lambda j: -d2 * j),
        )
        with open(filename, "w", encoding="utf-8") as file_out:
            for grid, q1_of, q2_of in quadrants:
                values = np.abs(grid) ** 2 / float(nsp)
                for qq1, row in enumerate(values):
                    q1 = q1_of(qq1)
                    for qq2, value in enumerate(row):
                        file_out.write(f"{q1:g} {q2_of(qq2):g} {value:g}\n")
                    file_out.write("\n")