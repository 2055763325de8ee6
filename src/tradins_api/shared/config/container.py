from tradins_api.application import GetHealthUseCase
from tradins_api.domain.ports import Clock, StorageModeProvider
from tradins_api.infrastructure.storage import ConfiguredStorageModeProvider
from tradins_api.shared.config.settings import Settings, settings
from tradins_api.shared.logging import ProbeLogger


class ApplicationContainer:
    """Dependency container for the storage mode provider and health use case."""

    def __init__(
        self,
        app_settings: Settings = settings,
        storage_mode_provider: StorageModeProvider | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.settings = app_settings
        self.storage_mode_provider = storage_mode_provider or ConfiguredStorageModeProvider(app_settings)
        self._clock = clock
        self._probe_logger = ProbeLogger()

    def create_get_health_use_case(self) -> GetHealthUseCase:
        """Create health use case with the configured provider and failure policy."""
        return GetHealthUseCase(
            storage_mode_provider=self.storage_mode_provider,
            clock=self._clock,
            failure_policy=self.settings.health_storage_failure_policy,
            probe_logger=self._probe_logger,
        )
