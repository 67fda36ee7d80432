"""Entry point for the FlightHub API.

Launches the FastAPI application under uvicorn.  Host, port and log
level come from ``flighthub_api.app.core.config.settings`` (``HOST``,
``PORT`` and ``LOG_LEVEL`` environment variables).

Usage:
    python run.py
"""
from uvicorn import Config, Server

from flighthub_api.app.core.config import settings
from flighthub_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
