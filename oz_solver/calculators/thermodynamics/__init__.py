"""
Thermodynamics subpackage

Energy, pressure and virial integrals derived from a solved g(r).
"""


from .thermo import (
    excess_energy,
    virial_pressure,
    second_virial_coefficient,
    isothermal_compressibility_ratio,
    thermodynamics_summary,
)
