from .validator import (
    DiagnosticCollector,
    check_location_bounds,
    check_location_columns,
    check_location_count,
    check_noise,
    check_reading_count,
    check_voxelisation,
    collect_location_sensor_diagnostics,
    validate_location_sensor,
)

__all__ = [
    "DiagnosticCollector",
    "check_location_count",
    "check_location_columns",
    "check_location_bounds",
    "check_voxelisation",
    "check_noise",
    "check_reading_count",
    "collect_location_sensor_diagnostics",
    "validate_location_sensor",
]
