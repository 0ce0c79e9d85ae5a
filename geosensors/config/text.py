"""Configuration text (YAML) <-> flat option mapping.

On disk a configuration is one mapping per heading:

    magnetism:
      enabled: true
      sensorLocations: data/magLocations.csv
      gridResolution: 20 20 20

which flattens to ``{"magnetism.enabled": True, "magnetism.sensorLocations": ...}``.
Top-level dotted keys (``"magnetism.enabled": true``) are accepted as well.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

PathLike = Union[str, Path]


def flatten_config(data: Mapping[str, Any]) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for heading, section in data.items():
        heading = str(heading)
        if isinstance(section, Mapping):
            for name, value in section.items():
                flat[f"{heading}.{name}"] = value
        else:
            flat[heading] = section
    return flat


def nest_config(options: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    nested: Dict[str, Dict[str, Any]] = {}
    for key, value in options.items():
        heading, _, name = key.partition(".")
        if not name:
            raise ValueError(f"option key must be '<heading>.<name>'; got '{key}'")
        nested.setdefault(heading, {})[name] = value
    return nested


def load_config_text(text: str) -> Dict[str, Any]:
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError("configuration text must be a mapping of headings to options")
    return flatten_config(data)


def load_config_file(path: PathLike) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return load_config_text(f.read())


def dump_config_text(options: Mapping[str, Any]) -> str:
    return yaml.safe_dump(nest_config(options), sort_keys=False, default_flow_style=False)


def write_config_file(path: PathLike, options: Mapping[str, Any]) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dump_config_text(options), encoding="utf-8")
    return p
