# oz_solver/utils.py

from dataclasses import dataclass
from itertools import count
from pathlib import Path

import numpy as np

from .errors import LengthMismatch, MalformedInput


@dataclass
class ExecutionContext:
    """Where an OZ run reads its input file and writes its JSON output."""

    input_file: Path | None = None
    scratch_dir: Path | None = None


def get_unique_dir(base_name: str = "scratch", root: Path | None = None) -> Path:
    """
    Create and return a fresh directory `root/base_name`, falling back to
    `base_name_1`, `base_name_2`, ... when earlier runs left theirs behind.
    """
    root = Path.cwd() if root is None else Path(root)

    candidates = (root / (base_name if n == 0 else f"{base_name}_{n}") for n in count())
    for candidate in candidates:
        if not candidate.exists():
            candidate.mkdir(parents=True)
            return candidate


def find_key_recursive(config, key):
    """Depth-first lookup of `key` in a nested configuration dict."""
    if not isinstance(config, dict):
        return None
    if key in config:
        return config[key]

    nested = (find_key_recursive(block, key) for block in config.values())
    return next((found for found in nested if found is not None), None)


def as_radial_array(name, values):
    """Return `values` as a non-empty 1-D float array."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1 or arr.size == 0:
        raise MalformedInput(
            f"'{name}' must be a non-empty 1-D sequence, got shape {arr.shape}"
        )
    return arr


def as_matching_radial_arrays(**named):
    """
    Convert each keyword argument with `as_radial_array` and require them to
    share the length of the first one.  Returns the arrays in argument order.
    """
    arrays = [as_radial_array(name, values) for name, values in named.items()]

    expected = arrays[0].size
    for name, arr in zip(named, arrays):
        if arr.size != expected:
            raise LengthMismatch(name, expected, arr.size)
    return arrays
