import logging

from .core.config import get_settings
from .main import create_app

logger = logging.getLogger(__name__)

# Create Flask app
app = create_app()


def run() -> None:
    """Run the development server on HOST:PORT."""
    settings = get_settings()
    logger.info(
        f"Server running at http://{settings.host}:{settings.port}",
        extra={"context": {"host": settings.host, "port": settings.port}},
    )
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
