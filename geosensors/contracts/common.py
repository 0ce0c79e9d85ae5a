from __future__ import annotations

"""Result contract base.

These models represent *outputs* handed to callers (validation reports, priors)
and are intended to be stable across pipeline stages.

Design goals:
- JSON-friendly field types at the contract boundary.
- Strict top-level validation (extra fields forbidden) to prevent silent drift.

Note: contracts should only depend on stdlib + pydantic (+ numpy for value objects).
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ResultModel(BaseModel):
    """Base class for result contracts (strict and immutable)."""

    model_config = ConfigDict(extra="forbid", frozen=True)


JSONDict = Dict[str, Any]
