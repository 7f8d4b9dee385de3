"""Run the web app with ``python -m commander``."""

import uvicorn

from commander.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "commander.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
