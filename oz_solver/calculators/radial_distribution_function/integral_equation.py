# oz_solver/calculators/radial_distribution_function/integral_equation.py

from abc import ABC, abstractmethod


class IntegralEquation(ABC):
    """
    OZ relation in reciprocal space, c(k) -> t(k).

    With `weighted = False` (default) the solver passes the plain c(k) and
    expects the plain t(k) back; with `weighted = True` it passes k c(k)
    straight from the forward transform and expects k t(k).
    """

    weighted = False

    @abstractmethod
    def calculate(self, c_k, k, density):
        """Return t(k) on the k grid."""

    @abstractmethod
    def inverse_structure_factor(self, c_k, k, density):
        """Return 1 - p c(k) for the same inputs `calculate` receives."""


def integral_equation_from_name(name, registry=None):
    """
    Resolve an integral equation given as a registry name ("OZ") or an instance.
    """
    from .registry import INTEGRAL_EQUATION_REGISTRY

    if isinstance(name, IntegralEquation):
        return name

    registry = INTEGRAL_EQUATION_REGISTRY if registry is None else registry
    key = str(name).upper()
    if key not in registry:
        raise ValueError(f"Unknown integral equation '{key}'")
    return registry[key]()
