"""Run the service: python -m app"""

import logging

import uvicorn

from app.config import settings


def main() -> None:
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s | %(message)s")
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
