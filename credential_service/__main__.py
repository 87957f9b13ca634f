"""Run the service with uvicorn: `python -m credential_service`."""

import uvicorn

from credential_service.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "credential_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
