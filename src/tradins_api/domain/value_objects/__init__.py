from tradins_api.domain.value_objects.health_report import (
    HEALTH_STATUS_DEGRADED,
    HEALTH_STATUS_OK,
    UNKNOWN_STORAGE_MODE,
    HealthReport,
    format_instant,
)

__all__ = [
    "HEALTH_STATUS_DEGRADED",
    "HEALTH_STATUS_OK",
    "UNKNOWN_STORAGE_MODE",
    "HealthReport",
    "format_instant",
]
