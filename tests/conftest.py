from collections.abc import Callable

import pytest
from fastapi import FastAPI

from helpers import FIXED_INSTANT, build_settings
from tradins_api.api.app import create_app
from tradins_api.domain.ports import Clock, StorageModeProvider
from tradins_api.infrastructure.storage import StaticStorageModeProvider
from tradins_api.shared.config.container import ApplicationContainer


@pytest.fixture
def fixed_clock() -> Clock:
    return lambda: FIXED_INSTANT


@pytest.fixture
def app_factory() -> Callable[..., FastAPI]:
    def _factory(
        provider: StorageModeProvider | None = None,
        clock: Clock | None = None,
        **setting_overrides: object,
    ) -> FastAPI:
        app_settings = build_settings(**setting_overrides)
        container = ApplicationContainer(
            app_settings,
            storage_mode_provider=provider or StaticStorageModeProvider("memory"),
            clock=clock,
        )
        return create_app(app_settings, container=container)

    return _factory
