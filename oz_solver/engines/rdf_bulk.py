# oz_solver/engines/rdf_bulk.py

import json
from pathlib import Path

import numpy as np

from ..generators.grids_properties import Grid
from ..generators.parameters import State, oz_configuration
from ..calculators.radial_distribution_function import Solver, progress_printer, report_outcome
from ..calculators.thermodynamics import thermodynamics_summary
from ..utils import find_key_recursive


def build_solver_from_config(config, callback=None):
    """
    Assemble a Solver from the nested dictionary produced by `parse_oz_input`
    (or the exported {"oz_parameters": ...} JSON).
    """
    grid_cfg = find_key_recursive(config, "grid")
    state_cfg = find_key_recursive(config, "state")
    potential_cfg = find_key_recursive(config, "potential")
    closure_cfg = find_key_recursive(config, "closure")
    if None in (grid_cfg, state_cfg, potential_cfg, closure_cfg):
        raise KeyError("OZ configuration needs grid, state, potential and closure blocks")
    solver_cfg = find_key_recursive(config, "solver") or {}
    ie_cfg = find_key_recursive(config, "integral_equation") or {}

    grid = Grid.new(grid_cfg["npts"], grid_cfg["radius"])

    state = (
        State.builder()
        .boltzmann_constant(state_cfg["kT"])
        .temperature(state_cfg["temperature"])
        .density(state_cfg["density"])
        .npts(grid.npts)
        .build()
    )

    builder = (
        Solver.builder()
        .grid(grid)
        .state(state)
        .potential(dict(potential_cfg))
        .closure(closure_cfg["type"])
        .integral_equation(ie_cfg.get("type", "OZ"))
    )

    if "tolerance" in solver_cfg:
        builder.tolerance(solver_cfg["tolerance"])
    if "max_iteration" in solver_cfg:
        builder.max_iterations(int(solver_cfg["max_iteration"]))
    if "damping" in solver_cfg:
        builder.damping(solver_cfg["damping"])
    if "metric" in solver_cfg:
        builder.metric(solver_cfg["metric"])

    if callback is None and solver_cfg.get("verbose", 0):
        callback = progress_printer(every=int(solver_cfg.get("monitor_every", 10)))
    if callback is not None:
        builder.callback(callback)

    return builder.build()


def export_oz_result(ctx, result, state, thermodynamics=None, filename_prefix="oz"):
    """
    Write r, g(r), h(r), c(r), t(r), u(r), k and S(k) to <scratch>/<prefix>_rdf.json.
    """
    out = Path(ctx.scratch_dir)
    out.mkdir(parents=True, exist_ok=True)

    json_out = {
        "metadata": {
            "outcome": result.outcome.value,
            "iterations": int(result.iterations),
            "residual": float(result.residual),
            "kT": state.kT,
            "temperature": state.T,
            "density": state.p,
            "beta": state.B,
            "n_points": int(len(result.r)),
        },
        "functions": {
            "r": result.r.tolist(),
            "g_r": result.g.tolist(),
            "h_r": result.h.tolist(),
            "c_r": result.c.tolist(),
            "t_r": result.t.tolist(),
            "u_r": result.u.tolist(),
            "k": result.k.tolist(),
            "s_k": result.s_k.tolist(),
        },
    }
    if thermodynamics is not None:
        json_out["thermodynamics"] = thermodynamics

    json_path = out / f"{filename_prefix}_rdf.json"
    with open(json_path, "w") as f:
        json.dump(json_out, f, indent=4)

    print(f"✅ OZ results exported to JSON → {json_path}")
    return json_path


def oz_bulk_executor(ctx, initial_guess=None, export=True):
    """
    Parse ctx.input_file, solve the OZ equation and export the result.

    Returns the OZResult.  NumericalDivergence and configuration errors
    propagate to the caller.
    """
    config = oz_configuration(ctx, export_json=export)
    solver = build_solver_from_config(config)

    print(solver.grid.details())
    print(solver.details())

    if initial_guess is None:
        initial_guess = np.zeros(solver.grid.npts)

    solver.initialise(initial_guess).solve()
    report_outcome(solver)

    result = solver.clean_up()
    thermo = thermodynamics_summary(result, solver.state, solver.potential)

    if export:
        export_oz_result(ctx, result, solver.state, thermodynamics=thermo)

    return result
