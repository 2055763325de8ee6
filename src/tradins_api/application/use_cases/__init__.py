from tradins_api.application.use_cases.get_health_use_case import GetHealthUseCase

__all__ = [
    "GetHealthUseCase",
]
