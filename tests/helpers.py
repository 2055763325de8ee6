from collections import deque
from datetime import UTC, datetime, timedelta
from threading import Lock

from tradins_api.shared.config import Settings

FIXED_INSTANT = datetime(2024, 1, 1, tzinfo=UTC)


class TickingClock:
    """Clock that advances by a fixed step on every read."""

    def __init__(self, start: datetime = FIXED_INSTANT, step: timedelta = timedelta(milliseconds=1)) -> None:
        self._current = start
        self._step = step
        self._lock = Lock()

    def __call__(self) -> datetime:
        with self._lock:
            value = self._current
            self._current = value + self._step
            return value


class SequenceStorageModeProvider:
    """Return queued storage modes in order and count the queries."""

    def __init__(self, modes: list[str]) -> None:
        self._modes = deque(modes)
        self.calls = 0

    def current_mode(self) -> str:
        self.calls += 1
        return self._modes.popleft()


class FailingStorageModeProvider:
    def __init__(self, error: Exception) -> None:
        self._error = error
        self.calls = 0

    def current_mode(self) -> str:
        self.calls += 1
        raise self._error


def build_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "POSTGRES_URL": "",
        "POSTGRES_PRISMA_URL": "",
        "HEALTH_STORAGE_FAILURE_POLICY": "propagate",
        "CORS_ALLOWED_ORIGINS": "",
        "API_PREFIX": "/api",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
