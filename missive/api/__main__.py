"""Run the API server: python -m missive.api"""

import uvicorn

from missive.api.dependencies import get_settings


def main() -> None:
    settings = get_settings()
    # State lives in one process, so a single worker serves every call
    uvicorn.run(
        "missive.api.app:app",
        host=settings.api.host,
        port=settings.api.port,
        workers=1,
    )


if __name__ == "__main__":
    main()
