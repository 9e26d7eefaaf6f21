"""Run the API server: ``python -m formrelay``."""

import uvicorn

from formrelay.config import settings


def main() -> None:
    uvicorn.run("formrelay.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
