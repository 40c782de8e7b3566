"""
Generators subpackage

Grids, pair potentials and problem parameters consumed by the OZ solver.
"""
