"""Shared fixtures for the OZ solver tests."""

from __future__ import annotations

import numpy as np
import pytest

from oz_solver.generators.grids_properties import Grid
from oz_solver.generators.parameters import State
from oz_solver.generators.potential import Potential, LennardJones


# Liquid argon near the triple point, in Angstrom / Kelvin units.
ARGON_SIGMA = 3.4
ARGON_EPSILON = 120.0
ARGON_TEMPERATURE = 85.0
ARGON_DENSITY = 0.0210175


class ZeroPotential(Potential):
    """u(r) = 0 everywhere."""

    def calculate(self, r):
        return np.zeros(len(r))


@pytest.fixture
def small_grid() -> Grid:
    return Grid.new(256, 10.24)


@pytest.fixture
def zero_potential() -> Potential:
    return ZeroPotential()


@pytest.fixture
def argon_potential() -> LennardJones:
    return LennardJones(ARGON_SIGMA, ARGON_EPSILON)


@pytest.fixture
def make_state():
    """Factory: make_state(npts, density=..., temperature=...)."""

    def _make(npts, density=ARGON_DENSITY, temperature=ARGON_TEMPERATURE, kT=1.0):
        return (
            State.builder()
            .boltzmann_constant(kT)
            .temperature(temperature)
            .density(density)
            .npts(npts)
            .build()
        )

    return _make
