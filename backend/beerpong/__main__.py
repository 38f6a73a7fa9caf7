"""Launcher — `python -m beerpong` serves the API with uvicorn."""

import uvicorn

from beerpong.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "beerpong.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
