# oz_solver/generators/potential/pair_potential_isotropic.py

from abc import ABC, abstractmethod

from .pair_potential_isotropic_registry import get_isotropic_pair_potential_factory


class Potential(ABC):
    """Pair potential u(r); implementations hold only their fixed parameters."""

    @abstractmethod
    def calculate(self, r):
        """Return u evaluated at every radius in `r` (same length)."""


def pair_potential_isotropic(specific_pair_potential):
    """
    Build a Potential from a dict such as {"type": "lj", "sigma": 3.4, "epsilon": 120.0}.
    """
    # registers the built-in potentials on first use
    from . import pair_potential_isotropic_default  # noqa: F401

    factory = get_isotropic_pair_potential_factory(specific_pair_potential)
    return factory(specific_pair_potential)
