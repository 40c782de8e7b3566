"""
Parameters subpackage

Problem state (kT, T, p and the correlation profiles) and the parser
for OZ input files.
"""


from .state import State, StateBuilder
from .oz_configuration import oz_configuration, parse_oz_input, check_oz_configuration
