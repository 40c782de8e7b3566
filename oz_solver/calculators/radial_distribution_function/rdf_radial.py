# oz_solver/calculators/radial_distribution_function/rdf_radial.py

"""
Damped Picard solver for the single-component OZ equation.

Throughout the iteration the state holds the r-weighted functions
r c(r) and r t(r), which is what the Fourier-Bessel transform consumes and
produces (see fourier_bessel.py).  One application of the OZ operator is

    r c(r) --forward--> k c(k) --OZ--> k t(k) --backward--> r t(r)
           --closure--> r c_A(r)

followed by the mixing step c_new = c + damp (c_A - c).  `clean_up`
divides the weights out again and forms h = t + c.
"""

from dataclasses import dataclass
from enum import Enum
import numbers

import numpy as np

from ...errors import (
    ConfigurationError,
    IncompleteConfiguration,
    InvalidSolverState,
    LengthMismatch,
    MalformedInput,
    NumericalDivergence,
)
from ...generators.grids_properties import FourierBesselTransform
from ...generators.potential import pair_potential_isotropic
from ...utils import as_radial_array
from .closure import closure_from_name
from .integral_equation import integral_equation_from_name


class SolverStatus(Enum):
    BUILT = "built"
    INITIALISED = "initialised"
    ITERATING = "iterating"
    CONVERGED = "converged"
    MAX_ITERATIONS_REACHED = "max_iterations_reached"
    DIVERGED = "diverged"
    ABORTED = "aborted"
    FINALISED = "finalised"


TERMINAL = (SolverStatus.CONVERGED, SolverStatus.MAX_ITERATIONS_REACHED)


# -----------------------------
# Convergence metrics
# -----------------------------
def sum_difference(c_new, c_prev, grid):
    return abs(np.sum(c_new) - np.sum(c_prev))


def rms_difference(c_new, c_prev, grid):
    return np.sqrt(grid.dr * np.sum((c_new - c_prev) ** 2) / c_new.size)


def max_difference(c_new, c_prev, grid):
    return np.max(np.abs(c_new - c_prev))


CONVERGENCE_METRICS = {
    "sum": sum_difference,
    "l2": rms_difference,
    "max": max_difference,
}


@dataclass
class OZResult:
    """Finalised output of a solve; all profiles are un-weighted."""

    outcome: SolverStatus
    iterations: int
    residual: float
    r: np.ndarray
    k: np.ndarray
    u: np.ndarray
    c: np.ndarray
    t: np.ndarray
    h: np.ndarray
    g: np.ndarray
    s_k: np.ndarray

    @property
    def converged(self):
        return self.outcome is SolverStatus.CONVERGED


class Solver:

    def __init__(
        self,
        grid,
        potential,
        closure,
        integral_equation,
        state,
        transform=None,
        tolerance=1e-5,
        max_iterations=10000,
        damping=0.2,
        metric="sum",
        singular_tol=1e-12,
        callback=None,
    ):
        if state.npts != grid.npts:
            raise LengthMismatch("state", grid.npts, state.npts)

        if transform is None:
            transform = FourierBesselTransform.build(grid)
        else:
            transform.check_grid(grid)

        self.grid = grid
        self.potential = potential
        self.closure = closure
        self.integral_equation = integral_equation
        self.state = state
        self.transform = transform
        self.tolerance = _check_tolerance(tolerance)
        self.max_iterations = _check_max_iterations(max_iterations)
        self.damping = _check_damping(damping)
        self.metric = _resolve_metric(metric)
        self.singular_tol = float(singular_tol)
        self.callback = callback

        self.status = SolverStatus.BUILT
        self.iterations = 0
        self.residual = np.inf

    @classmethod
    def builder(cls):
        return SolverBuilder()

    # -----------------------------
    # Lifecycle
    # -----------------------------
    def initialise(self, initial_guess):
        """Set u = potential(r) and seed the r-weighted c with `initial_guess`."""
        guess = np.array(initial_guess, dtype=float)
        if guess.ndim != 1:
            raise MalformedInput(
                f"initial guess must be 1-D, got shape {guess.shape}"
            )
        self.grid.check_length("initial_guess", guess)

        npts = self.grid.npts
        u = as_radial_array("u", self.potential.calculate(self.grid.ri))
        self.grid.check_length("u", u)

        self.state.u = u
        self.state.c = guess
        self.state.t = np.zeros(npts)
        self.state.h = np.zeros(npts)

        self.status = SolverStatus.INITIALISED
        self.iterations = 0
        self.residual = np.inf
        return self

    def solve(self, tol=None, maxiter=None):
        """
        Iterate the damped OZ operator until the residual drops below `tol`
        or `maxiter` iterations have run.

        Returns self; inspect `status` for CONVERGED vs MAX_ITERATIONS_REACHED.
        Raises NumericalDivergence as soon as a non-finite value appears.
        """
        if self.status is not SolverStatus.INITIALISED:
            raise InvalidSolverState(
                f"solve() requires an initialised solver, status is '{self.status.value}'"
            )

        tol = self.tolerance if tol is None else _check_tolerance(tol)
        max_iter = self.max_iterations if maxiter is None else _check_max_iterations(maxiter)
        damp = self.damping

        self.status = SolverStatus.ITERATING
        try:
            self._iterate(tol, max_iter, damp)
        except NumericalDivergence:
            self.status = SolverStatus.DIVERGED
            raise
        except BaseException:
            # state.c may already have advanced; only initialise() recovers
            self.status = SolverStatus.ABORTED
            raise

        return self

    def _iterate(self, tol, max_iter, damp):
        i = 0
        while True:
            c_prev = self.state.c
            t, c_A = self.oz_operator(c_prev, iteration=i)

            c_new = c_prev + damp * (c_A - c_prev)
            self.residual = float(self.metric(c_new, c_prev, self.grid))

            self.state.c = c_new
            self.state.t = t

            if self.callback is not None:
                self.callback(i, self.residual, self.state.summary())

            if self.residual < tol:
                self.iterations = i + 1
                self.status = SolverStatus.CONVERGED
                break

            i += 1

            if i == max_iter:
                self.iterations = i
                self.status = SolverStatus.MAX_ITERATIONS_REACHED
                break

    def clean_up(self):
        """Divide out the r-weighting, form h = t + c and return an OZResult."""
        if self.status not in TERMINAL:
            raise InvalidSolverState(
                f"clean_up() requires a terminal status, status is '{self.status.value}'"
            )

        outcome = self.status
        r = self.grid.ri
        self.state.c = self.state.c / r
        self.state.t = self.state.t / r
        self.state.h = self.state.t + self.state.c
        self.status = SolverStatus.FINALISED

        return OZResult(
            outcome=outcome,
            iterations=self.iterations,
            residual=self.residual,
            r=np.array(r),
            k=np.array(self.grid.ki),
            u=self.state.u.copy(),
            c=self.state.c.copy(),
            t=self.state.t.copy(),
            h=self.state.h.copy(),
            g=1.0 + self.state.h,
            s_k=self.structure_factor(self.state.h),
        )

    # -----------------------------
    # OZ operator
    # -----------------------------
    def oz_operator(self, c, iteration=0):
        """
        One pass r c(r) -> (r t(r), r c_A(r)) without mixing.
        """
        r = self.grid.ri
        k = self.grid.ki
        p = self.state.p
        ie = self.integral_equation

        ck = self.transform.forward(c)
        ck_arg = ck if ie.weighted else ck / k

        inv_s = ie.inverse_structure_factor(ck_arg, k, p)
        if not np.all(np.isfinite(inv_s)) or np.min(np.abs(inv_s)) < self.singular_tol:
            raise NumericalDivergence(
                "1 - p c(k)", iteration,
                f"min |1 - p c(k)| = {np.min(np.abs(inv_s)):0.3e}",
            )

        tk = ie.calculate(ck_arg, k, p)
        self.grid.check_length("t(k)", tk)
        if not ie.weighted:
            tk = tk * k
        _check_finite("t(k)", tk, iteration)

        t = self.transform.backward(tk)
        _check_finite("t(r)", t, iteration)

        c_A = as_radial_array("c(r)", self.closure.calculate(r, self.state.u, t / r, self.state.B))
        self.grid.check_length("c(r)", c_A)
        c_A = r * c_A
        _check_finite("c(r)", c_A, iteration)

        return t, c_A

    def structure_factor(self, h):
        """S(k) = 1 + p h(k) for an un-weighted h(r)."""
        hk = self.transform.forward(self.grid.ri * h) / self.grid.ki
        return 1.0 + self.state.p * hk

    def details(self):
        return (
            f"OZ: closure = {self.closure!r}, integral equation = {self.integral_equation!r}, "
            f"damping = {self.damping}, tol = {self.tolerance:0.1e}, "
            f"max iterations = {self.max_iterations}"
        )


class SolverBuilder:
    """
    Collects the solver components; `build()` names the first missing one.

    `potential`, `closure` and `integral_equation` also accept the registry
    forms used by input files (a potential dict, "HNC", "OZ").
    """

    _required = ("grid", "potential", "closure", "integral_equation", "state")

    def __init__(self):
        self._fields = dict.fromkeys(self._required)
        self._options = {}

    def grid(self, grid):
        self._fields["grid"] = grid
        return self

    def potential(self, potential):
        self._fields["potential"] = potential
        return self

    def closure(self, closure):
        self._fields["closure"] = closure
        return self

    def integral_equation(self, integral_equation):
        self._fields["integral_equation"] = integral_equation
        return self

    def state(self, state):
        self._fields["state"] = state
        return self

    def transform(self, transform):
        self._options["transform"] = transform
        return self

    def tolerance(self, tol):
        self._options["tolerance"] = tol
        return self

    def max_iterations(self, maxiter):
        self._options["max_iterations"] = maxiter
        return self

    def damping(self, damp):
        self._options["damping"] = damp
        return self

    def metric(self, metric):
        self._options["metric"] = metric
        return self

    def callback(self, callback):
        self._options["callback"] = callback
        return self

    def build(self):
        for name in self._required:
            if self._fields[name] is None:
                raise IncompleteConfiguration(name, owner="Solver")

        fields = dict(self._fields)
        if isinstance(fields["potential"], dict):
            fields["potential"] = pair_potential_isotropic(fields["potential"])
        fields["closure"] = closure_from_name(fields["closure"])
        fields["integral_equation"] = integral_equation_from_name(fields["integral_equation"])

        return Solver(**fields, **self._options)


# -----------------------------
# Validation helpers
# -----------------------------
def _check_finite(name, values, iteration):
    if not np.all(np.isfinite(values)):
        bad = int(np.count_nonzero(~np.isfinite(values)))
        raise NumericalDivergence(name, iteration, f"{bad} non-finite values")


def _check_tolerance(tol):
    if not isinstance(tol, numbers.Real) or not tol > 0:
        raise ConfigurationError(f"tolerance must be a positive real, got {tol!r}")
    return float(tol)


def _check_max_iterations(maxiter):
    if isinstance(maxiter, bool) or not isinstance(maxiter, numbers.Integral) or maxiter <= 0:
        raise ConfigurationError(
            f"max_iterations must be a positive integer, got {maxiter!r}"
        )
    return int(maxiter)


def _check_damping(damp):
    if not isinstance(damp, numbers.Real) or not 0.0 < damp <= 1.0:
        raise ConfigurationError(f"damping must lie in (0, 1], got {damp!r}")
    return float(damp)


def _resolve_metric(metric):
    if callable(metric):
        return metric
    key = str(metric).lower()
    if key not in CONVERGENCE_METRICS:
        raise ConfigurationError(
            f"Unknown convergence metric '{metric}'; choose from {sorted(CONVERGENCE_METRICS)}"
        )
    return CONVERGENCE_METRICS[key]
