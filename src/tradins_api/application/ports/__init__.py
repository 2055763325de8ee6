from tradins_api.domain.ports import (
    Clock,
    StorageFailurePolicy,
    StorageModeProvider,
    StorageModeUnavailableError,
)

__all__ = [
    "Clock",
    "StorageFailurePolicy",
    "StorageModeProvider",
    "StorageModeUnavailableError",
]
