from __future__ import annotations

from typing import Iterable, List, Tuple

from pydantic import Field

from .choices import CheckName, SensorType
from .common import ResultModel


class Diagnostic(ResultModel):
    """One failed validation check, specific enough to locate and fix."""

    sensor: SensorType
    check: CheckName
    message: str


class ValidationReport(ResultModel):
    """Aggregate outcome of validating one or more sensors.

    ``valid`` is the logical AND of every check that ran; ``diagnostics`` lists
    every failing check in the order it was evaluated.
    """

    valid: bool = True
    diagnostics: Tuple[Diagnostic, ...] = Field(default_factory=tuple)

    @classmethod
    def from_diagnostics(cls, diagnostics: Iterable[Diagnostic]) -> "ValidationReport":
        diags = tuple(diagnostics)
        return cls(valid=not diags, diagnostics=diags)

    @classmethod
    def merge(cls, *reports: "ValidationReport") -> "ValidationReport":
        diags: List[Diagnostic] = []
        valid = True
        for r in reports:
            valid = valid and r.valid
            diags.extend(r.diagnostics)
        return cls(valid=valid, diagnostics=tuple(diags))

    def checks(self) -> List[CheckName]:
        """Failing check names, in order (duplicates kept)."""
        return [d.check for d in self.diagnostics]

    def messages(self) -> List[str]:
        return [d.message for d in self.diagnostics]

    def __bool__(self) -> bool:
        return self.valid
