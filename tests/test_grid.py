"""Radial grid construction."""

from __future__ import annotations

import numpy as np
import pytest

from oz_solver.errors import InvalidGrid, LengthMismatch
from oz_solver.generators.grids_properties import Grid


@pytest.mark.parametrize("npts, radius", [(1, 1.0), (64, 10.24), (1024, 10.24), (333, 0.7)])
def test_grid_spacings_and_half_offsets(npts: int, radius: float) -> None:
    grid = Grid.new(npts, radius)
    dr = radius / npts
    dk = np.pi / (npts * dr)

    assert grid.dr == pytest.approx(dr)
    assert grid.dk == pytest.approx(dk)
    assert len(grid.ri) == npts
    assert len(grid.ki) == npts
    assert grid.ri[0] == pytest.approx(0.5 * dr)
    assert grid.ri[-1] == pytest.approx((npts - 0.5) * dr)
    assert grid.ki[0] == pytest.approx(0.5 * dk)
    assert grid.ki[-1] == pytest.approx((npts - 0.5) * dk)
    np.testing.assert_allclose(np.diff(grid.ri), dr)


@pytest.mark.parametrize("npts, radius", [(0, 1.0), (-4, 1.0), (16, 0.0), (16, -2.0), (2.5, 1.0)])
def test_invalid_grid_parameters_are_rejected(npts, radius) -> None:
    with pytest.raises(InvalidGrid):
        Grid.new(npts, radius)


def test_grid_arrays_are_read_only() -> None:
    grid = Grid.new(32, 1.0)
    with pytest.raises(ValueError):
        grid.ri[0] = 0.0
    with pytest.raises(AttributeError):
        grid.npts = 64


def test_check_length() -> None:
    grid = Grid.new(32, 1.0)
    grid.check_length("ok", np.zeros(32))
    with pytest.raises(LengthMismatch, match="expected 32"):
        grid.check_length("bad", np.zeros(31))
