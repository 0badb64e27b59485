"""Run the service: ``python -m rate_directory`` (HOST / PORT from settings)."""

import uvicorn

from rate_directory.core.config import get_settings
from rate_directory.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the JSON handler installed by init_logging
    )


if __name__ == "__main__":
    main()
