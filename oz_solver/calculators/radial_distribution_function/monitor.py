# oz_solver/calculators/radial_distribution_function/monitor.py

"""
Iteration callbacks for Solver(callback=...).

A callback receives (iteration, residual, summary) once per iteration,
where summary is State.summary().
"""

from .rdf_radial import SolverStatus


def progress_printer(every=10, label="OZ"):
    """Print an 'Iter | residual | c range' table every `every` iterations."""

    def callback(iteration, residual, summary):
        if iteration == 0:
            print(f"\n🚀 Starting {label} solver")
            print(f"{'Iter':>6s} | {'residual':>12s} | {'c(min)':>11s} | {'c(max)':>11s}")
        if iteration % every == 0:
            print(
                f"{iteration:6d} | {residual:12.3e} | "
                f"{summary['c_min']:11.4e} | {summary['c_max']:11.4e}"
            )

    return callback


def history_recorder(history):
    """Append (iteration, residual) pairs to the list `history`."""

    def callback(iteration, residual, summary):
        history.append((iteration, residual))

    return callback


def report_outcome(solver):
    """One closing status line for a solver that has left the loop."""
    if solver.status is SolverStatus.CONVERGED:
        print(f"\n✅ Converged in {solver.iterations} iterations (residual {solver.residual:0.3e}).")
    elif solver.status is SolverStatus.MAX_ITERATIONS_REACHED:
        print(f"\n⚠️ Warning: not converged after {solver.iterations} iterations "
              f"(residual {solver.residual:0.3e}).")
    else:
        print(f"\nSolver status: {solver.status.value}")
