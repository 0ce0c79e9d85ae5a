from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

import numpy as np


@dataclass(frozen=True, eq=False)
class EmitPlan:
    """Description of what re-emitting a value into configuration form produces.

    - options: ``{"<heading>.<option>": text}`` in declaration order
    - tables:  ``{path: array}`` files that would be written under the prefix

    Building a plan never touches the filesystem; see
    :func:`geosensors.io.export.write_emit_plan` for the storage step.
    """

    options: Dict[str, str] = field(default_factory=dict)
    tables: Dict[str, np.ndarray] = field(default_factory=dict)

    @classmethod
    def merge(cls, *plans: "EmitPlan") -> "EmitPlan":
        options: Dict[str, str] = {}
        tables: Dict[str, np.ndarray] = {}
        for p in plans:
            options.update(p.options)
            tables.update(p.tables)
        return cls(options=options, tables=tables)
