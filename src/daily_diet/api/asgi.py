"""ASGI entrypoint for the daily diet API."""

import uvicorn

from daily_diet.api.app import create_app
from daily_diet.containers import build_container

container = build_container()
app = create_app(container)


def main() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    uvicorn.run(
        app,
        host=container.settings.host,
        port=container.settings.port,
        log_config=None,
    )
