# oz_solver/generators/parameters/state.py

"""
Numerical record of one OZ problem.

The scalar parameters (kT, T, p) are fixed at construction, B = 1/(kT T) is
derived from them.  The four profiles u, c, t, h all have one entry per grid
point; c and t are overwritten by the solver on every iteration and h only
becomes meaningful after the solver's clean-up.
"""

import numpy as np

from ...errors import IncompleteConfiguration, ConfigurationError


class State:

    def __init__(self, kT, T, p, npts):
        if not (np.isfinite(kT) and kT > 0) or not (np.isfinite(T) and T > 0):
            raise ConfigurationError(
                f"kT and T must be finite and positive, got kT={kT}, T={T}"
            )
        if not (np.isfinite(p) and p >= 0):
            raise ConfigurationError(f"density must be finite and non-negative, got {p}")
        if npts <= 0:
            raise ConfigurationError(f"npts must be positive, got {npts}")

        self.kT = float(kT)
        self.T = float(T)
        self.p = float(p)
        self.npts = int(npts)

        self.u = np.zeros(self.npts)
        self.c = np.zeros(self.npts)
        self.t = np.zeros(self.npts)
        self.h = np.zeros(self.npts)

    @property
    def B(self):
        return 1.0 / (self.kT * self.T)

    @classmethod
    def builder(cls):
        return StateBuilder()

    def summary(self):
        """Scalars handed to iteration callbacks."""
        return {
            "c_min": float(np.min(self.c)),
            "c_max": float(np.max(self.c)),
            "t_min": float(np.min(self.t)),
            "t_max": float(np.max(self.t)),
        }

    def __repr__(self):
        return (
            f"State(kT={self.kT}, T={self.T}, p={self.p}, "
            f"B={self.B:0.6g}, npts={self.npts})"
        )


class StateBuilder:
    """
    Accumulates the mandatory problem parameters.

    Example
    -------
    >>> state = (
    ...     State.builder()
    ...     .boltzmann_constant(1.0)
    ...     .temperature(85.0)
    ...     .density(0.021017479720736955)
    ...     .npts(1024)
    ...     .build()
    ... )
    """

    _required = ("kT", "T", "p", "npts")

    def __init__(self):
        self._fields = dict.fromkeys(self._required)

    def boltzmann_constant(self, kT):
        self._fields["kT"] = kT
        return self

    def temperature(self, T):
        self._fields["T"] = T
        return self

    def density(self, p):
        self._fields["p"] = p
        return self

    def npts(self, npts):
        self._fields["npts"] = npts
        return self

    def build(self):
        for name in self._required:
            if self._fields[name] is None:
                raise IncompleteConfiguration(name, owner="State")
        return State(**self._fields)
