# oz_solver/calculators/radial_distribution_function/registry.py

from .builtin import HyperNettedChain, OrnsteinZernike, KWeightedOrnsteinZernike

CLOSURE_REGISTRY = {
    "HNC": HyperNettedChain,
}

INTEGRAL_EQUATION_REGISTRY = {
    "OZ": OrnsteinZernike,
    "OZ_K_WEIGHTED": KWeightedOrnsteinZernike,
}


def register_closure(name, factory, overwrite=False):
    key = name.upper()
    if key in CLOSURE_REGISTRY and not overwrite:
        raise KeyError(f"Closure '{key}' already registered")
    CLOSURE_REGISTRY[key] = factory


def register_integral_equation(name, factory, overwrite=False):
    key = name.upper()
    if key in INTEGRAL_EQUATION_REGISTRY and not overwrite:
        raise KeyError(f"Integral equation '{key}' already registered")
    INTEGRAL_EQUATION_REGISTRY[key] = factory
