"""Run the API with uvicorn: ``python -m facilitaki``."""

import uvicorn

from facilitaki.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "facilitaki.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
