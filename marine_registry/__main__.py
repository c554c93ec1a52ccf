"""Run the API with uvicorn: python -m marine_registry."""

import uvicorn

from marine_registry.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "marine_registry.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    main()
