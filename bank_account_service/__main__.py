"""Run the service with uvicorn using the configured server section."""
import uvicorn

from bank_account_service.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "bank_account_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
