"""Run the API with uvicorn: python -m commerce."""

import uvicorn

from commerce.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "commerce.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
