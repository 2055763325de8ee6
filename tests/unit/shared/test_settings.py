import logging

import pytest
from pydantic import ValidationError

from helpers import build_settings
from tradins_api.shared.config import Settings
from tradins_api.shared.logging import configure_logging


def test_settings_defaults_select_propagate_policy_and_api_prefix(monkeypatch) -> None:
    for name in ("POSTGRES_URL", "POSTGRES_PRISMA_URL", "HEALTH_STORAGE_FAILURE_POLICY", "API_PREFIX"):
        monkeypatch.delenv(name, raising=False)

    app_settings = Settings(_env_file=None)

    assert app_settings.health_storage_failure_policy == "propagate"
    assert app_settings.api_prefix == "/api"
    assert app_settings.has_postgres is False


def test_settings_reads_values_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("POSTGRES_URL", "postgres://u:p@host/db")
    monkeypatch.setenv("HEALTH_STORAGE_FAILURE_POLICY", "degraded")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", " http://a.test , ,http://b.test")

    app_settings = Settings(_env_file=None)

    assert app_settings.has_postgres is True
    assert app_settings.health_storage_failure_policy == "degraded"
    assert app_settings.cors_allowed_origins_list == ["http://a.test", "http://b.test"]


def test_settings_empty_postgres_url_falls_back_to_prisma_url(monkeypatch) -> None:
    monkeypatch.setenv("POSTGRES_URL", "")
    monkeypatch.setenv("POSTGRES_PRISMA_URL", "postgres://u:p@host/db")

    app_settings = Settings(_env_file=None)

    assert app_settings.postgres_url == ""
    assert app_settings.effective_postgres_url == "postgres://u:p@host/db"
    assert app_settings.has_postgres is True


def test_settings_rejects_unknown_failure_policy() -> None:
    with pytest.raises(ValidationError):
        build_settings(HEALTH_STORAGE_FAILURE_POLICY="retry")


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        configure_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous_level)
