# oz_solver/generators/parameters/oz_configuration.py

import json
from pathlib import Path


SECTIONS = ("grid", "state", "potential", "closure", "integral_equation", "solver")

REQUIRED_KEYS = {
    "grid": ("npts", "radius"),
    "state": ("kT", "temperature", "density"),
    "potential": ("type",),
    "closure": ("type",),
}


_BOOLEANS = {"true": True, "yes": True, "on": True, "false": False, "no": False, "off": False}


def _coerce(val):
    if val.lower() in _BOOLEANS:
        return _BOOLEANS[val.lower()]
    for cast in (int, float):
        try:
            return cast(val)
        except ValueError:
            continue
    return val


def parse_oz_input(text):
    """
    Parse `section key = value` lines into a nested dictionary.

    Lines starting with '#' (and trailing '# ...' comments) are ignored, as
    are lines whose first word is not a known section.
    """
    config = {section: {} for section in SECTIONS}

    for line in text.splitlines():
        line = line.split("#")[0].strip()
        if not line or "=" not in line:
            continue

        head, val = line.split("=", 1)
        words = head.split()
        if len(words) != 2:
            continue

        section, key = words[0].lower(), words[1].strip()
        if section not in config:
            continue

        config[section][key] = _coerce(val.strip())

    return config


def check_oz_configuration(config):
    """Raise KeyError naming the first missing required entry."""
    for section, keys in REQUIRED_KEYS.items():
        block = config.get(section, {})
        for key in keys:
            if key not in block:
                raise KeyError(f"Missing '{section} {key}' in OZ input")
    return config


def oz_configuration(ctx, export_json=True, filename="input_oz_parameters.json"):
    """
    Parse OZ parameters from `ctx.input_file` and check consistency.

    Parameters
    ----------
    ctx : ExecutionContext
        Must provide ctx.input_file; ctx.scratch_dir when exporting
    export_json : bool
        Whether to export the parsed dictionary to JSON
    filename : str
        Output JSON filename (within scratch_dir)
    """
    input_file = Path(ctx.input_file)
    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")

    config = check_oz_configuration(parse_oz_input(input_file.read_text()))

    if export_json:
        scratch = Path(ctx.scratch_dir)
        scratch.mkdir(parents=True, exist_ok=True)
        out_file = scratch / filename
        with open(out_file, "w") as f:
            json.dump({"oz_parameters": config}, f, indent=4)
        print(f"✅ OZ parameters exported to: {out_file}")

    return config
