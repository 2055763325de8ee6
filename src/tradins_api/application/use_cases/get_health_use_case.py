from datetime import UTC, datetime

from tradins_api.domain.ports import (
    Clock,
    StorageFailurePolicy,
    StorageModeProvider,
    StorageModeUnavailableError,
)
from tradins_api.domain.value_objects import HealthReport
from tradins_api.shared.logging import ProbeLogger

_FAILURE_POLICIES: frozenset[str] = frozenset({"propagate", "degraded"})


class GetHealthUseCase:
    """Build a fresh health report from the storage mode provider and the clock.

    The provider is queried exactly once per call and its answer is passed
    through untouched. When the provider fails, `failure_policy` decides the
    outcome: `propagate` raises `StorageModeUnavailableError`, `degraded`
    returns a report with `ok=False` and `status="degraded"`.

    Example:
        ```python
        use_case = GetHealthUseCase(StaticStorageModeProvider("memory"))
        report = use_case.execute()
        assert report.status == "ok"
        ```
    """

    def __init__(
        self,
        storage_mode_provider: StorageModeProvider,
        clock: Clock | None = None,
        failure_policy: StorageFailurePolicy = "propagate",
        probe_logger: ProbeLogger | None = None,
    ) -> None:
        if failure_policy not in _FAILURE_POLICIES:
            raise ValueError(f"Unsupported storage failure policy: {failure_policy}")
        self._storage_mode_provider = storage_mode_provider
        self._clock = clock or (lambda: datetime.now(UTC))
        self._failure_policy = failure_policy
        self._probe_logger = probe_logger or ProbeLogger()

    @property
    def failure_policy(self) -> StorageFailurePolicy:
        return self._failure_policy

    def execute(self) -> HealthReport:
        """Return the current health snapshot."""
        try:
            storage = self._storage_mode_provider.current_mode()
        except Exception as exc:
            self._probe_logger.log_storage_mode_unavailable(
                error=exc,
                context={"policy": self._failure_policy},
            )
            if self._failure_policy == "degraded":
                self._probe_logger.log_degraded(reason="storage_mode_unavailable")
                return HealthReport.degraded(instant=self._clock())
            if isinstance(exc, StorageModeUnavailableError):
                raise
            raise StorageModeUnavailableError("Storage mode provider failed") from exc

        return HealthReport.healthy(storage=storage, instant=self._clock())
