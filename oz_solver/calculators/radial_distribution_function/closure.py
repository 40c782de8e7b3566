# oz_solver/calculators/radial_distribution_function/closure.py

from abc import ABC, abstractmethod


class Closure(ABC):
    """
    Closure relation c = F(r, u, t, B).

    Arguments and result are plain (un-weighted) radial functions on the
    grid; the solver owns any r-weighting needed by the transforms.
    """

    @abstractmethod
    def calculate(self, r, u, t, B):
        """Return the candidate direct correlation function c(r)."""


def closure_from_name(name, closure_registry=None):
    """
    Resolve a closure given as a registry name ("HNC") or an instance.
    """
    from .registry import CLOSURE_REGISTRY

    if isinstance(name, Closure):
        return name

    registry = CLOSURE_REGISTRY if closure_registry is None else closure_registry
    key = str(name).upper()
    if key not in registry:
        raise ValueError(f"Unknown closure '{key}'")
    return registry[key]()
