"""Iteration callbacks."""

from __future__ import annotations

import numpy as np

from oz_solver.calculators.radial_distribution_function import (
    Solver,
    progress_printer,
    report_outcome,
)


def test_progress_printer_prints_every_nth_iteration(small_grid, argon_potential, make_state, capsys) -> None:
    solver = (
        Solver.builder()
        .grid(small_grid)
        .potential(argon_potential)
        .closure("HNC")
        .integral_equation("OZ")
        .state(make_state(small_grid.npts))
        .max_iterations(25)
        .tolerance(1e-300)
        .callback(progress_printer(every=10))
        .build()
    )

    solver.initialise(np.zeros(small_grid.npts)).solve()
    report_outcome(solver)

    lines = capsys.readouterr().out.splitlines()
    rows = [line for line in lines if line.strip() and line.strip()[0].isdigit()]
    assert [int(row.split("|")[0]) for row in rows] == [0, 10, 20]
    assert any("not converged after 25 iterations" in line for line in lines)


def test_callback_receives_state_summary(small_grid, argon_potential, make_state) -> None:
    seen = []

    def callback(iteration, residual, summary):
        seen.append((iteration, residual, summary))

    solver = (
        Solver.builder()
        .grid(small_grid)
        .potential(argon_potential)
        .closure("HNC")
        .integral_equation("OZ")
        .state(make_state(small_grid.npts))
        .max_iterations(2)
        .tolerance(1e-300)
        .callback(callback)
        .build()
    )
    solver.initialise(np.zeros(small_grid.npts)).solve()

    assert len(seen) == 2
    iteration, residual, summary = seen[0]
    assert iteration == 0
    assert residual > 0.0
    assert set(summary) == {"c_min", "c_max", "t_min", "t_max"}
