from tradins_api.domain.ports import (
    Clock,
    StorageFailurePolicy,
    StorageModeProvider,
    StorageModeUnavailableError,
)
from tradins_api.domain.value_objects import (
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
    "Clock",
    "HealthReport",
    "StorageFailurePolicy",
    "StorageModeProvider",
    "StorageModeUnavailableError",
    "format_instant",
]
