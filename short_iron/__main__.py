"""Serve the application with uvicorn: ``python -m short_iron``."""

import uvicorn

from short_iron.core.config import settings


def main() -> None:
    uvicorn.run(
        "short_iron.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # logging is routed through loguru
    )


if __name__ == "__main__":
    main()
