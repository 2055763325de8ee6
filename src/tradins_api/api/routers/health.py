from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from tradins_api.api.middleware import NO_STORE_HEADERS
from tradins_api.api.schemas import ErrorResponseDTO, HealthResponseDTO
from tradins_api.application import GetHealthUseCase
from tradins_api.shared.config.container import ApplicationContainer

router = APIRouter(tags=["health"])


def get_health_use_case(request: Request) -> GetHealthUseCase:
    """Resolve the health use case from the container stored by `create_app`."""
    container: ApplicationContainer = request.app.state.container
    return container.create_get_health_use_case()


@router.get(
    "/health",
    response_model=HealthResponseDTO,
    summary="Health check",
    description="Report process health, the active storage mode and the current UTC instant.",
    responses={
        200: {
            "description": "Service healthy",
            "content": {
                "application/json": {
                    "example": {
                        "ok": True,
                        "status": "ok",
                        "storage": "memory",
                        "now": "2024-01-01T00:00:00.000Z",
                    }
                }
            },
        },
        500: {
            "model": ErrorResponseDTO,
            "description": "Storage mode could not be determined",
        },
        503: {
            "model": HealthResponseDTO,
            "description": "Degraded: storage mode unavailable and degraded reporting enabled",
        },
    },
)
async def health_check(
    response: Response,
    use_case: Annotated[GetHealthUseCase, Depends(get_health_use_case)],
) -> HealthResponseDTO:
    """Return a fresh health snapshot; never cached."""
    report = use_case.execute()
    response.headers.update(NO_STORE_HEADERS)
    if not report.ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponseDTO.from_report(report)
