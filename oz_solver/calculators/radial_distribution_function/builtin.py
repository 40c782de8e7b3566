# oz_solver/calculators/radial_distribution_function/builtin.py

import numpy as np

from ...utils import as_matching_radial_arrays
from .closure import Closure
from .integral_equation import IntegralEquation
from .utils import overflow_tolerant_exp


class HyperNettedChain(Closure):
    """HNC: c(r) = exp(-B u(r) + t(r)) - 1 - t(r)."""

    def calculate(self, r, u, t, B):
        r, u, t = as_matching_radial_arrays(r=r, u=u, t=t)
        with np.errstate(invalid="ignore"):
            return overflow_tolerant_exp(-B * u + t) - 1.0 - t

    def __repr__(self):
        return "HyperNettedChain()"


class OrnsteinZernike(IntegralEquation):
    """t(k) = p c(k)^2 / (1 - p c(k))"""

    def calculate(self, c_k, k, density):
        c_k, k = as_matching_radial_arrays(c_k=c_k, k=k)
        pc = density * c_k
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return pc * c_k / (1.0 - pc)

    def inverse_structure_factor(self, c_k, k, density):
        c_k, k = as_matching_radial_arrays(c_k=c_k, k=k)
        return 1.0 - density * c_k

    def __repr__(self):
        return "OrnsteinZernike()"


class KWeightedOrnsteinZernike(IntegralEquation):
    """
    t(k) k = p (k c(k))^2 / (k - p k c(k))

    Operates directly on k-weighted input C = k c(k) and returns k t(k).
    Dividing through by k gives back the standard form above, so on the
    same input both classes produce the same iterates.
    """

    weighted = True

    def calculate(self, c_k, k, density):
        C, k = as_matching_radial_arrays(c_k=c_k, k=k)
        pC = density * C
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return pC * C / (k - pC)

    def inverse_structure_factor(self, c_k, k, density):
        C, k = as_matching_radial_arrays(c_k=c_k, k=k)
        return 1.0 - density * C / k

    def __repr__(self):
        return "KWeightedOrnsteinZernike()"
