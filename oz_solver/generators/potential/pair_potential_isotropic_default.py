# oz_solver/generators/potential/pair_potential_isotropic_default.py

import numpy as np

from ...utils import as_radial_array
from .pair_potential_isotropic import Potential
from .pair_potential_isotropic_registry import (
    ISOTROPIC_PAIR_POTENTIAL_REGISTRY,
    register_isotropic_pair_potential,
)


# ------------------------------------------------------------
# LENNARD-JONES
# ------------------------------------------------------------
class LennardJones(Potential):
    """u(r) = 4 epsilon [(sigma/r)^12 - (sigma/r)^6]"""

    def __init__(self, sigma, epsilon):
        if sigma <= 0:
            raise ValueError(f"sigma must be positive, got {sigma}")
        self.sigma = float(sigma)
        self.epsilon = float(epsilon)

    def calculate(self, r):
        r = as_radial_array("r", r)
        ir6 = (self.sigma / r) ** 6
        return 4.0 * self.epsilon * (ir6 * ir6 - ir6)

    def __repr__(self):
        return f"LennardJones(sigma={self.sigma}, epsilon={self.epsilon})"


def lj(p):
    return LennardJones(p.get("sigma", 1.0), p.get("epsilon", 1.0))


def pair_potential_isotropic_default():
    for name in ["lj", "lennard-jones"]:
        if name not in ISOTROPIC_PAIR_POTENTIAL_REGISTRY:
            register_isotropic_pair_potential(name, lj)


pair_potential_isotropic_default()
