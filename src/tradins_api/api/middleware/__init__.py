from tradins_api.api.middleware.error_handler import NO_STORE_HEADERS, ErrorHandlerMiddleware

__all__ = [
    "NO_STORE_HEADERS",
    "ErrorHandlerMiddleware",
]
