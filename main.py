"""
Vitals Suggestion Service entry point.
"""
import uvicorn

from vitalsuggest.app import create_app
from vitalsuggest.config.settings import get_settings


app = create_app()


def serve() -> None:
    """Run the service on the configured host and port, without auto-reload."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
