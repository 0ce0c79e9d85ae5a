from __future__ import annotations

"""Typed configuration options and the composed configuration schema.

Options live in a flat ``<heading>.<optionName>`` namespace. Each sensor model
declares its options into a :class:`ConfigSchema` that is built once and
passed explicitly to parse calls. Unknown keys in a configuration are ignored
here; they belong to other parsers.
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from geosensors.errors import MissingOption

ConfigValues = Mapping[str, Any]


class OptionKind(str, Enum):
    BOOL = "bool"
    PATH = "path"
    INT = "int"
    UINT = "uint"
    REAL = "real"
    VEC3I = "vec3i"
    VEC3D = "vec3d"


class OptionSpec(BaseModel):
    """One recognised configuration option."""

    model_config = ConfigDict(frozen=True)

    key: str
    kind: OptionKind
    description: str
    required: bool = True
    # File-backed options name a table that is only read for enabled sensors.
    file_backed: bool = False

    @property
    def heading(self) -> str:
        return self.key.split(".", 1)[0]

    @property
    def name(self) -> str:
        return self.key.split(".", 1)[1]


# -----------------------------
# Coercion (text or native YAML value -> typed value)
# -----------------------------

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def _to_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, int) and v in (0, 1):
        return bool(v)
    s = str(v).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"not a boolean: {v!r}")


def _to_int(v: Any) -> int:
    if isinstance(v, bool):
        raise ValueError(f"not an integer: {v!r}")
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        if not v.is_integer():
            raise ValueError(f"not an integer: {v!r}")
        return int(v)
    return int(str(v).strip())


def _to_uint(v: Any) -> int:
    n = _to_int(v)
    if n < 0:
        raise ValueError(f"expected a non-negative integer; got {n}")
    return n


def _to_real(v: Any) -> float:
    if isinstance(v, bool):
        raise ValueError(f"not a real number: {v!r}")
    if isinstance(v, (int, float)):
        return float(v)
    return float(str(v).strip())


def _split_vector(v: Any) -> List[Any]:
    if isinstance(v, (list, tuple)):
        items = list(v)
    else:
        items = str(v).replace(",", " ").split()
    if len(items) != 3:
        raise ValueError(f"expected 3 values; got {v!r}")
    return items


def _to_vec3i(v: Any) -> Tuple[int, int, int]:
    a, b, c = (_to_int(x) for x in _split_vector(v))
    return (a, b, c)


def _to_vec3d(v: Any) -> Tuple[float, float, float]:
    a, b, c = (_to_real(x) for x in _split_vector(v))
    return (a, b, c)


def _to_path(v: Any) -> str:
    s = str(v).strip()
    if not s:
        raise ValueError("empty path")
    return s


_COERCERS: Dict[OptionKind, Callable[[Any], Any]] = {
    OptionKind.BOOL: _to_bool,
    OptionKind.PATH: _to_path,
    OptionKind.INT: _to_int,
    OptionKind.UINT: _to_uint,
    OptionKind.REAL: _to_real,
    OptionKind.VEC3I: _to_vec3i,
    OptionKind.VEC3D: _to_vec3d,
}


def coerce_option(kind: OptionKind, value: Any) -> Any:
    return _COERCERS[kind](value)


# -----------------------------
# Formatting (typed value -> text)
# -----------------------------

def format_real(v: Any) -> str:
    return repr(float(v))


def format_option(kind: OptionKind, value: Any) -> str:
    """Render a typed value as configuration text that coerces back to it."""
    if kind == OptionKind.BOOL:
        return "true" if _to_bool(value) else "false"
    if kind in (OptionKind.INT, OptionKind.UINT):
        return str(_to_int(value))
    if kind == OptionKind.REAL:
        return format_real(value)
    if kind == OptionKind.VEC3I:
        return " ".join(str(int(x)) for x in _split_vector(list(value)))
    if kind == OptionKind.VEC3D:
        return " ".join(format_real(x) for x in _split_vector(list(value)))
    return str(value)


class ConfigSchema:
    """Explicit set of recognised options, composed from every sensor model.

    Built once at configuration time and treated as read-only afterwards.
    """

    def __init__(self, options: Optional[Iterable[OptionSpec]] = None):
        self._options: Dict[str, OptionSpec] = {}
        for opt in options or ():
            self.declare(opt)

    def declare(self, option: OptionSpec) -> OptionSpec:
        if option.key in self._options:
            raise ValueError(f"option '{option.key}' declared twice")
        if "." not in option.key:
            raise ValueError(f"option key must be '<heading>.<name>'; got '{option.key}'")
        self._options[option.key] = option
        return option

    def add(
        self,
        key: str,
        kind: OptionKind,
        description: str,
        *,
        required: bool = True,
        file_backed: bool = False,
    ) -> OptionSpec:
        return self.declare(
            OptionSpec(key=key, kind=kind, description=description, required=required, file_backed=file_backed)
        )

    def option(self, key: str) -> OptionSpec:
        if key not in self._options:
            raise KeyError(f"config schema: unknown option {key!r}")
        return self._options[key]

    def options_for(self, heading: str) -> List[OptionSpec]:
        return [o for o in self._options.values() if o.heading == heading]

    def keys(self) -> Iterable[str]:
        return self._options.keys()

    def __contains__(self, key: str) -> bool:
        return key in self._options

    def __len__(self) -> int:
        return len(self._options)

    def value(self, config: ConfigValues, key: str, default: Any = None) -> Any:
        """Read and coerce ``key``.

        A missing required option raises :class:`MissingOption`; a missing
        optional option returns ``default``. An uncoercible value raises
        ``ValueError`` naming the key.
        """
        opt = self.option(key)
        raw = config.get(key)
        if raw is None:
            if opt.required:
                raise MissingOption(key)
            return default
        try:
            return coerce_option(opt.kind, raw)
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid value for '{key}' ({opt.kind.value}): {e}") from e
