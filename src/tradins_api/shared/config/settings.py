from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tradins_api.domain.ports import StorageFailurePolicy


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Tradins API", validation_alias=AliasChoices("APP_NAME"))
    app_version: str = Field(default="0.1.0", validation_alias=AliasChoices("APP_VERSION"))
    app_env: str = Field(default="local", validation_alias=AliasChoices("APP_ENV"))
    app_debug: bool = Field(default=False, validation_alias=AliasChoices("APP_DEBUG", "DEBUG"))
    api_host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("API_HOST"))
    api_port: int = Field(default=8000, validation_alias=AliasChoices("API_PORT"))
    api_prefix: str = Field(default="/api", validation_alias=AliasChoices("API_PREFIX"))
    cors_allowed_origins: str = Field(
        default="",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS"),
    )
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))

    postgres_url: str = Field(
        default="",
        validation_alias=AliasChoices("POSTGRES_URL"),
    )
    postgres_prisma_url: str = Field(
        default="",
        validation_alias=AliasChoices("POSTGRES_PRISMA_URL"),
    )
    health_storage_failure_policy: StorageFailurePolicy = Field(
        default="propagate",
        validation_alias=AliasChoices("HEALTH_STORAGE_FAILURE_POLICY"),
    )

    @property
    def cors_allowed_origins_list(self) -> list[str]:
        return [value.strip() for value in self.cors_allowed_origins.split(",") if value.strip()]

    @property
    def effective_postgres_url(self) -> str:
        return self.postgres_url.strip() or self.postgres_prisma_url.strip()

    @property
    def has_postgres(self) -> bool:
        return bool(self.effective_postgres_url)


settings = Settings()
