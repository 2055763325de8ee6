import logging
from collections.abc import Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from tradins_api.api.schemas import ErrorResponseDTO
from tradins_api.domain.ports import StorageModeUnavailableError
from tradins_api.shared.logging import mask_secrets_in_text

logger = logging.getLogger(__name__)

NO_STORE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
}


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except StorageModeUnavailableError as exc:
            self._log_exception("storage_mode_error", request, exc)
            return JSONResponse(
                status_code=500,
                content=ErrorResponseDTO(
                    error="Internal server error",
                    message="Storage mode could not be determined.",
                    code="STORAGE_MODE_UNAVAILABLE",
                ).model_dump(),
                headers=NO_STORE_HEADERS,
            )
        except Exception as exc:
            self._log_exception("unexpected_error", request, exc)
            return JSONResponse(
                status_code=500,
                content=ErrorResponseDTO(
                    error="Internal server error",
                    message="Unable to process request. Please try again later.",
                    code="INTERNAL_ERROR",
                ).model_dump(),
                headers=NO_STORE_HEADERS,
            )

    @staticmethod
    def _log_exception(error_type: str, request: Request, exc: Exception) -> None:
        logger.exception(
            "api_error type=%s method=%s path=%s detail=%s",
            error_type,
            request.method,
            request.url.path,
            mask_secrets_in_text(str(exc)),
        )
