# oz_solver/generators/potential/pair_potential_isotropic_registry.py

"""
Name -> factory table for isotropic pair potentials.

Input files select a potential with `potential type = <name>`; the factory
receives the whole `potential` block and returns a Potential.  Names are
case-insensitive.
"""

ISOTROPIC_PAIR_POTENTIAL_REGISTRY = {}


def register_isotropic_pair_potential(potential_type, factory_fn, overwrite=False):
    name = potential_type.lower()
    if not overwrite and name in ISOTROPIC_PAIR_POTENTIAL_REGISTRY:
        raise KeyError(f"Isotropic potential '{name}' already registered")
    ISOTROPIC_PAIR_POTENTIAL_REGISTRY[name] = factory_fn


def get_isotropic_pair_potential_factory(potential):
    """Factory for the `type` entry of a potential block."""
    if not isinstance(potential, dict):
        raise TypeError("Potential parameters must be a dict")

    name = str(potential.get("type", "")).lower()
    try:
        return ISOTROPIC_PAIR_POTENTIAL_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(ISOTROPIC_PAIR_POTENTIAL_REGISTRY)) or "none"
        raise ValueError(f"Unknown potential type: {name!r} (known: {known})") from None
