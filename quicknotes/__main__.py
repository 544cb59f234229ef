"""Development server entry point: `python -m quicknotes`."""

import uvicorn

from quicknotes.config import settings


def main() -> None:
    uvicorn.run(
        "quicknotes.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
