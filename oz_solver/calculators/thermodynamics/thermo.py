# oz_solver/calculators/thermodynamics/thermo.py

"""
Thermodynamic integrals over a finalised OZ result.

All integrals are radial, 4 pi r^2 dr, evaluated with Simpson's rule on the
solver grid.  Energies are in the units of u(r); the thermal energy is
1/B = kT T.
"""

import numpy as np
from scipy import integrate

from ..radial_distribution_function.utils import overflow_tolerant_exp

# B u above this counts as inside the repulsive core, where g(r) = 0
CORE_CUTOFF = 50.0


def _core_masked_g(result, B):
    return np.where(B * result.u > CORE_CUTOFF, 0.0, result.g)


def excess_energy(result, density, B):
    """
    Excess internal energy per particle,

        U_ex / N = 2 pi p  int u(r) g(r) r^2 dr
    """
    r = result.r
    integrand = result.u * _core_masked_g(result, B) * r**2
    return 2.0 * np.pi * density * integrate.simpson(integrand, x=r)


def virial_pressure(result, density, B):
    """
    Pressure from the virial route,

        P = p / B - (2 pi / 3) p^2  int r u'(r) g(r) r^2 dr
    """
    r = result.r
    du = np.gradient(result.u, r)
    integrand = r * du * _core_masked_g(result, B) * r**2
    return density / B - (2.0 * np.pi / 3.0) * density**2 * integrate.simpson(integrand, x=r)


def second_virial_coefficient(potential, r, B):
    """
    B2 = -2 pi int (exp(-B u(r)) - 1) r^2 dr
    """
    r = np.asarray(r, dtype=float)
    f = overflow_tolerant_exp(-B * potential.calculate(r)) - 1.0
    return -2.0 * np.pi * integrate.simpson(f * r**2, x=r)


def isothermal_compressibility_ratio(result):
    """S(k -> 0), i.e. p kT chi_T, taken from the lowest k point."""
    return float(result.s_k[0])


def thermodynamics_summary(result, state, potential=None):
    out = {
        "excess_energy": float(excess_energy(result, state.p, state.B)),
        "virial_pressure": float(virial_pressure(result, state.p, state.B)),
        "compressibility_ratio": isothermal_compressibility_ratio(result),
    }
    if potential is not None:
        out["second_virial_coefficient"] = float(
            second_virial_coefficient(potential, result.r, state.B)
        )
    return out
