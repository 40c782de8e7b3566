"""Fourier-Bessel transform plan and normalisation."""

from __future__ import annotations

from types import SimpleNamespace

import numpy as np
import pytest
from scipy import fft

from oz_solver.errors import PlanConstructionFailed, TransformSizeMismatch
from oz_solver.generators.grids_properties import FourierBesselTransform, Grid


@pytest.mark.parametrize("npts", [64, 256, 1024])
def test_round_trip_recovers_input(npts: int) -> None:
    grid = Grid.new(npts, 10.24)
    fbt = FourierBesselTransform.build(grid)
    r = grid.ri
    f = r * np.exp(-((r - 2.0) ** 2)) * np.cos(1.5 * r)

    back = fbt.backward(fbt.forward(f))

    np.testing.assert_allclose(back, f, rtol=1e-9, atol=1e-12 * np.max(np.abs(f)))


def test_forward_matches_scipy_dst_type_four(small_grid: Grid) -> None:
    fbt = FourierBesselTransform.build(small_grid)
    x = np.sin(small_grid.ri) * np.exp(-small_grid.ri)

    expected = 2.0 * np.pi * small_grid.dr * fft.dst(x, type=4)

    np.testing.assert_allclose(fbt.forward(x), expected, rtol=1e-10, atol=1e-14)


def test_gaussian_transforms_to_gaussian() -> None:
    # f(r) = exp(-r^2)  <->  f(k) = pi^(3/2) exp(-k^2 / 4)
    grid = Grid.new(512, 10.24)
    fbt = FourierBesselTransform.build(grid)
    r, k = grid.ri, grid.ki

    fk = fbt.forward(r * np.exp(-r**2)) / k

    np.testing.assert_allclose(fk, np.pi**1.5 * np.exp(-k**2 / 4.0), atol=1e-8)


def test_plan_is_reused_between_calls(small_grid: Grid) -> None:
    fbt = FourierBesselTransform.build(small_grid)
    x = np.linspace(0.0, 1.0, small_grid.npts)
    first = fbt.forward(x)
    fbt.backward(np.ones(small_grid.npts))
    np.testing.assert_array_equal(fbt.forward(x), first)


def test_zero_size_plan_is_rejected() -> None:
    with pytest.raises(PlanConstructionFailed):
        FourierBesselTransform.build(SimpleNamespace(npts=0, dr=1.0, dk=1.0))


def test_mismatched_sizes_are_rejected(small_grid: Grid) -> None:
    fbt = FourierBesselTransform.build(small_grid)
    with pytest.raises(TransformSizeMismatch):
        fbt.forward(np.zeros(small_grid.npts + 1))
    with pytest.raises(TransformSizeMismatch):
        fbt.check_grid(Grid.new(small_grid.npts * 2, small_grid.radius))
    fbt.check_grid(Grid.new(small_grid.npts, small_grid.radius))
