from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from typing import Any

HEALTH_STATUS_OK = "ok"
HEALTH_STATUS_DEGRADED = "degraded"
UNKNOWN_STORAGE_MODE = "unknown"


def format_instant(instant: datetime) -> str:
    """Render an instant as RFC 3339 UTC with millisecond precision and `Z` suffix."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    rendered = instant.astimezone(UTC).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Immutable snapshot of process and storage health for a single probe."""

    ok: bool
    status: str
    storage: str
    now: str

    @classmethod
    def healthy(cls, *, storage: str, instant: datetime) -> "HealthReport":
        return cls(ok=True, status=HEALTH_STATUS_OK, storage=storage, now=format_instant(instant))

    @classmethod
    def degraded(cls, *, instant: datetime) -> "HealthReport":
        return cls(
            ok=False,
            status=HEALTH_STATUS_DEGRADED,
            storage=UNKNOWN_STORAGE_MODE,
            now=format_instant(instant),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
