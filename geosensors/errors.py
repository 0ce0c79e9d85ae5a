"""Error kinds raised across geosensors.

Configuration and decode errors are boundary failures: they are reported and
the run is aborted before any expensive work. They are never retried because
they stem from deterministic input defects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from geosensors.contracts.validation import ValidationReport


class GeoSensorsError(Exception):
    """Base class for all geosensors errors."""


class MissingOption(GeoSensorsError, KeyError):
    """Raised when a required configuration key is absent."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"missing required configuration option '{self.key}'"


class MalformedPayload(GeoSensorsError, ValueError):
    """Raised when a wire payload fails schema or shape checks."""


class ShapeMismatch(MalformedPayload):
    """Raised when matrix bytes disagree with the declared row/column counts."""


class MalformedTable(GeoSensorsError, ValueError):
    """Raised when a location or reading table file cannot be used as one."""

    def __init__(self, path: object, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ValidationFailure(GeoSensorsError):
    """Raised by callers that choose to abort on a failed validation report."""

    def __init__(self, report: "ValidationReport"):
        self.report = report
        n = len(report.diagnostics)
        super().__init__(f"input validation failed with {n} problem(s)")


class UnknownSensorType(GeoSensorsError, KeyError):
    """Raised on a registry lookup miss. This is a wiring defect, not user input."""

    def __init__(self, sensor_type: object):
        super().__init__(sensor_type)
        self.sensor_type = sensor_type

    def __str__(self) -> str:
        return f"no sensor model registered for {self.sensor_type!r}"
