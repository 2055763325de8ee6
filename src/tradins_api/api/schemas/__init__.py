from tradins_api.api.schemas.health_dto import ErrorResponseDTO, HealthResponseDTO

__all__ = [
    "ErrorResponseDTO",
    "HealthResponseDTO",
]
