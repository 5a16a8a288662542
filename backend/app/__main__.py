"""Run the API with uvicorn: python -m app"""

import uvicorn

from app.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
