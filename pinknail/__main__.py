"""Run the Pink Nail API with uvicorn using the configured host and port."""

import uvicorn

from pinknail.server.core.config import settings


def main() -> None:
    uvicorn.run(
        "pinknail.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
