import uvicorn

from tradins_api.api.app import create_app
from tradins_api.shared.config import settings

app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "tradins_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
