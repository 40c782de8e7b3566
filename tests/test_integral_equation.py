"""Reciprocal-space OZ relation, standard and k-weighted forms."""

from __future__ import annotations

import numpy as np
import pytest

from oz_solver.calculators.radial_distribution_function import (
    KWeightedOrnsteinZernike,
    OrnsteinZernike,
)
from oz_solver.calculators.radial_distribution_function.integral_equation import (
    integral_equation_from_name,
)
from oz_solver.errors import LengthMismatch


@pytest.fixture
def k_and_c():
    k = (np.arange(64) + 0.5) * 0.3
    c_k = -20.0 * np.exp(-(k**2) / 8.0) + 3.0 * np.sin(k) / k
    return k, c_k


def test_standard_form(k_and_c) -> None:
    k, c_k = k_and_c
    p = 0.02
    t_k = OrnsteinZernike().calculate(c_k, k, p)

    np.testing.assert_allclose(t_k, p * c_k**2 / (1.0 - p * c_k))


def test_zero_density_gives_zero_t(k_and_c) -> None:
    k, c_k = k_and_c
    np.testing.assert_array_equal(OrnsteinZernike().calculate(c_k, k, 0.0), np.zeros_like(k))
    np.testing.assert_array_equal(
        KWeightedOrnsteinZernike().calculate(k * c_k, k, 0.0), np.zeros_like(k)
    )


def test_k_weighted_form_matches_standard_form(k_and_c) -> None:
    k, c_k = k_and_c
    p = 0.021

    standard = OrnsteinZernike().calculate(c_k, k, p)
    weighted = KWeightedOrnsteinZernike().calculate(k * c_k, k, p)

    np.testing.assert_allclose(weighted / k, standard, rtol=1e-12)


def test_inverse_structure_factor_agrees_between_forms(k_and_c) -> None:
    k, c_k = k_and_c
    p = 0.021

    np.testing.assert_allclose(
        KWeightedOrnsteinZernike().inverse_structure_factor(k * c_k, k, p),
        OrnsteinZernike().inverse_structure_factor(c_k, k, p),
    )


def test_singular_denominator_is_not_raised_here() -> None:
    k = np.array([1.0])
    t_k = OrnsteinZernike().calculate(np.array([2.0]), k, 0.5)
    assert not np.isfinite(t_k[0])


def test_integral_equation_lookup() -> None:
    assert isinstance(integral_equation_from_name("oz"), OrnsteinZernike)
    assert integral_equation_from_name("OZ_K_WEIGHTED").weighted
    with pytest.raises(ValueError, match="Unknown integral equation"):
        integral_equation_from_name("RISM")


@pytest.mark.parametrize("ie", [OrnsteinZernike(), KWeightedOrnsteinZernike()])
def test_mismatched_c_and_k_are_rejected(ie) -> None:
    k = (np.arange(8) + 0.5) * 0.3
    with pytest.raises(LengthMismatch):
        ie.calculate(np.ones(1), k, 0.02)
    with pytest.raises(LengthMismatch):
        ie.inverse_structure_factor(np.ones(7), k, 0.02)
