from collections.abc import Callable
from datetime import datetime
from typing import Literal, Protocol

Clock = Callable[[], datetime]

StorageFailurePolicy = Literal["propagate", "degraded"]


class StorageModeUnavailableError(RuntimeError):
    """Raised when the active storage mode cannot be determined."""

    pass


class StorageModeProvider(Protocol):
    def current_mode(self) -> str: ...
