from tradins_api.infrastructure.storage.storage_mode_provider import (
    MEMORY_STORAGE_MODE,
    POSTGRES_STORAGE_MODE,
    ConfiguredStorageModeProvider,
    StaticStorageModeProvider,
    find_postgres_url_problem,
)

__all__ = [
    "MEMORY_STORAGE_MODE",
    "POSTGRES_STORAGE_MODE",
    "ConfiguredStorageModeProvider",
    "StaticStorageModeProvider",
    "find_postgres_url_problem",
]
