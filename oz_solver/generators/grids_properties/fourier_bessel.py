# oz_solver/generators/grids_properties/fourier_bessel.py

"""
Forward/backward Fourier-Bessel (radial 3d) transforms on a half-offset grid.

A real odd discrete Fourier transform of type IV (FFTW_RODFT11),

    Y_k = 2 sum_j X_j sin(pi (j + 1/2)(k + 1/2) / N),

is planned once for the grid size and reused for every call.  With the
scale factors below the pair reads

    k f(k) = 2 pi dr      * DST[r f(r)],
    r f(r) = dk / (2 pi)^2 * DST[k f(k)],

i.e. both directions work on r- (resp. k-) weighted functions, and since
DST-IV applied twice is 2N times the identity, backward(forward(x)) == x.
"""

import numpy as np
import pyfftw

from ...errors import PlanConstructionFailed, TransformSizeMismatch


class FourierBesselTransform:

    def __init__(self, npts, dr, dk, plan, x_buffer, y_buffer):
        self.npts = npts
        self.dr = dr
        self.dk = dk
        self.forward_scale = 2.0 * np.pi * dr
        self.backward_scale = dk / (2.0 * np.pi) ** 2
        self._plan = plan
        self._x = x_buffer
        self._y = y_buffer

    @classmethod
    def build(cls, grid):
        """Plan a DST-IV of size grid.npts; raises PlanConstructionFailed."""
        npts = getattr(grid, "npts", 0)
        if npts <= 0:
            raise PlanConstructionFailed(f"cannot plan a transform of size {npts}")

        try:
            x = pyfftw.empty_aligned(npts, dtype="float64")
            y = pyfftw.empty_aligned(npts, dtype="float64")
            plan = pyfftw.FFTW(x, y, direction="FFTW_RODFT11", flags=("FFTW_ESTIMATE",))
        except (ValueError, MemoryError, RuntimeError) as exc:
            raise PlanConstructionFailed(
                f"FFTW refused a RODFT11 plan of size {npts}: {exc}"
            ) from exc

        return cls(npts, grid.dr, grid.dk, plan, x, y)

    # -----------------------------
    # Validation
    # -----------------------------
    def check_grid(self, grid):
        """Reject a grid other than the one this plan was built for."""
        if grid.npts != self.npts or not np.isclose(grid.dr, self.dr):
            raise TransformSizeMismatch(
                f"plan built for npts={self.npts}, dr={self.dr:g}; "
                f"got npts={grid.npts}, dr={grid.dr:g}"
            )

    def _execute(self, values, scale):
        values = np.asarray(values, dtype=float)
        if values.shape != (self.npts,):
            raise TransformSizeMismatch(
                f"plan built for {self.npts} points, got input of shape {values.shape}"
            )
        self._x[:] = values
        self._plan.execute()
        return scale * np.array(self._y)

    # -----------------------------
    # Transforms
    # -----------------------------
    def forward(self, f_r):
        """r-weighted f(r) -> k-weighted f(k)."""
        return self._execute(f_r, self.forward_scale)

    def backward(self, f_k):
        """k-weighted f(k) -> r-weighted f(r)."""
        return self._execute(f_k, self.backward_scale)
