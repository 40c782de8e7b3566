"""
oz_solver

Ornstein-Zernike integral equation solver for simple isotropic liquids:
radial grids, Fourier-Bessel transforms, closures, and a damped Picard
solve engine, plus input-file assembly and JSON export.
"""


from .utils import ExecutionContext, get_unique_dir
from .generators.grids_properties import Grid, FourierBesselTransform
from .generators.parameters import State
from .generators.potential import Potential, LennardJones
from .calculators.radial_distribution_function import (
    Closure,
    IntegralEquation,
    HyperNettedChain,
    OrnsteinZernike,
    KWeightedOrnsteinZernike,
    Solver,
    SolverStatus,
    OZResult,
)
