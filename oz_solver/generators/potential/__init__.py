"""
Potential subpackage

Pair potential interface, the Lennard-Jones reference implementation
and the name registry used by input files.
"""


from .pair_potential_isotropic import Potential, pair_potential_isotropic
from .pair_potential_isotropic_default import LennardJones
from .pair_potential_isotropic_registry import register_isotropic_pair_potential
