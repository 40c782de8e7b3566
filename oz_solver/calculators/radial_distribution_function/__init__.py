"""
Radial distribution function subpackage

Strategy interfaces (closure, integral equation), their reference
implementations, and the damped Picard OZ solver.
"""


from .closure import Closure
from .integral_equation import IntegralEquation
from .builtin import HyperNettedChain, OrnsteinZernike, KWeightedOrnsteinZernike
from .registry import (
    CLOSURE_REGISTRY,
    INTEGRAL_EQUATION_REGISTRY,
    register_closure,
    register_integral_equation,
)
from .rdf_radial import (
    Solver,
    SolverBuilder,
    SolverStatus,
    OZResult,
    CONVERGENCE_METRICS,
)
from .monitor import progress_printer, history_recorder, report_outcome
