# oz_solver/generators/grids_properties/radial_grid.py

"""
Radial r- and k-space grid for isotropic Fourier-Bessel transforms.

Both grids are offset by half a cell,

    r_i = (i + 1/2) dr,   k_j = (j + 1/2) dk,   dk = pi / (N dr),

so that sin(k_j r_i) = sin(pi (i + 1/2)(j + 1/2) / N) is exactly the kernel
of a type-IV discrete sine transform and neither grid touches r = 0 or k = 0.
"""

from dataclasses import dataclass
import numbers

import numpy as np

from ...errors import InvalidGrid, LengthMismatch


@dataclass(frozen=True, eq=False)
class Grid:
    """Immutable radial grid; build with `Grid.new(npts, radius)`."""

    npts: int
    radius: float
    dr: float
    dk: float
    ri: np.ndarray
    ki: np.ndarray

    @classmethod
    def new(cls, npts, radius):
        if isinstance(npts, bool) or not isinstance(npts, numbers.Integral) or npts <= 0:
            raise InvalidGrid(f"npts must be a positive integer, got {npts!r}")
        if not isinstance(radius, numbers.Real) or not np.isfinite(radius) or radius <= 0:
            raise InvalidGrid(f"radius must be a positive real, got {radius!r}")

        npts = int(npts)
        radius = float(radius)
        dr = radius / npts
        dk = np.pi / (npts * dr)

        half = np.arange(npts, dtype=float) + 0.5
        ri = half * dr
        ki = half * dk
        ri.flags.writeable = False
        ki.flags.writeable = False

        return cls(npts=npts, radius=radius, dr=dr, dk=dk, ri=ri, ki=ki)

    def check_length(self, name, values):
        """Raise LengthMismatch unless `values` has one entry per grid point."""
        n = len(values)
        if n != self.npts:
            raise LengthMismatch(name, self.npts, n)

    def details(self):
        return (
            f"Grid: npts = {self.npts}, R = {self.radius}, "
            f"dr = {self.dr:0.4g}, dk = {self.dk:0.4g}"
        )
