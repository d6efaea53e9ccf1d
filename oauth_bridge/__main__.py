"""Run the bridge with uvicorn: ``python -m oauth_bridge``."""

import uvicorn

from oauth_bridge.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "oauth_bridge.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":  # pragma: no cover - script entry point
    main()
