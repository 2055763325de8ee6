from tradins_api.application.use_cases import GetHealthUseCase

__all__ = [
    "GetHealthUseCase",
]
