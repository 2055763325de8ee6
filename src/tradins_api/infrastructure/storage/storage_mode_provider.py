from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from tradins_api.shared.config.settings import Settings, settings

MEMORY_STORAGE_MODE = "memory"
POSTGRES_STORAGE_MODE = "vercel_postgres"

_POSTGRES_BACKENDS = frozenset({"postgres", "postgresql"})


class ConfiguredStorageModeProvider:
    """Report the storage backend selected by the process configuration.

    Any non-empty `POSTGRES_URL` (or `POSTGRES_PRISMA_URL` when the first is
    empty) selects `vercel_postgres`; without one the records live in the
    local store and the mode is `memory`. The URL content is not inspected
    here, see `find_postgres_url_problem` for the startup check.

    Example:
        ```python
        provider = ConfiguredStorageModeProvider(Settings(POSTGRES_URL=""))
        assert provider.current_mode() == "memory"
        ```
    """

    def __init__(self, app_settings: Settings = settings) -> None:
        self._settings = app_settings

    def current_mode(self) -> str:
        """Resolve the active storage mode from settings on every call."""
        if self._settings.has_postgres:
            return POSTGRES_STORAGE_MODE
        return MEMORY_STORAGE_MODE


class StaticStorageModeProvider:
    """Always report the same storage mode identifier."""

    def __init__(self, mode: str) -> None:
        self._mode = mode

    def current_mode(self) -> str:
        return self._mode


def find_postgres_url_problem(app_settings: Settings) -> str | None:
    """Return a description of what is wrong with the configured Postgres URL, if anything."""
    if not app_settings.has_postgres:
        return None
    try:
        url = make_url(app_settings.effective_postgres_url)
    except ArgumentError:
        return "Configured Postgres URL cannot be parsed"

    backend = url.get_backend_name()
    if backend not in _POSTGRES_BACKENDS:
        return f"Configured storage URL uses unsupported backend: {backend}"
    return None
