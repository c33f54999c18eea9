"""Entry point for running the application with uvicorn."""

import uvicorn

from leave_engine.config import configure_logging, settings


def main() -> None:
    """Run the application."""
    configure_logging()
    uvicorn.run(
        "leave_engine.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
