"""
Engines subpackage

Input-file driven assembly of the OZ solver and result export.
"""


from .rdf_bulk import oz_bulk_executor, build_solver_from_config, export_oz_result
