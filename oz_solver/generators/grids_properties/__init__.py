"""
Grid subpackage

Radial r/k grids and the Fourier-Bessel transform planned on them.
"""


from .radial_grid import Grid
from .fourier_bessel import FourierBesselTransform
