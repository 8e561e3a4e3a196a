"""Loading run configuration from YAML files."""

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .datastructures import PlateConfig

CONFIG_KEYS = {f.name for f in fields(PlateConfig)}


def read_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Read plate settings from a YAML file.

    The settings may sit at the top level or under a ``plate:`` key.

    Parameters
    ----------
    path : str or Path
        Path to the YAML file.

    Returns
    -------
    dict
        Settings keyed by PlateConfig field name.

    Examples
    --------
    >>> # plate.yaml
    >>> # plate:
    >>> #   rows: 200
    >>> #   cols: 300
    >>> #   tolerance: 1.0e-4
    >>> read_config('plate.yaml')
    {'rows': 200, 'cols': 300, 'tolerance': 0.0001}
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    if "plate" in data:
        data = data["plate"] or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: 'plate' must be a mapping")

    unknown = sorted(set(data) - CONFIG_KEYS)
    if unknown:
        raise ValueError(f"{path}: unknown configuration keys: {', '.join(unknown)}")
    return data


def load_config(path: Union[str, Path] = None, **overrides) -> PlateConfig:
    """Build a PlateConfig from an optional YAML file plus overrides.

    Overrides whose value is None are ignored, so unset command line
    options do not mask values from the file.
    """
    settings = read_config(path) if path is not None else {}
    unknown = sorted(set(overrides) - CONFIG_KEYS)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return PlateConfig(**settings)
