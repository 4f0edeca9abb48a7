"""Main entry point for the Zen Class reporting API."""
import logging
import sys

from pymongo.errors import PyMongoError

from zenclass.app import create_app
from zenclass.config.settings import HOST, PORT
from zenclass.logging_config import setup_logging

logger = logging.getLogger("zenclass.main")


def main():
    setup_logging()
    app = create_app()

    try:
        app.check_connection()
    except PyMongoError as e:
        logger.error(f"MongoDB connection error: {e}")
        sys.exit(1)

    logger.info(f"Zen Class API server running on port {PORT}")
    try:
        app.run(host=HOST, port=PORT)
    finally:
        app.close()


if __name__ == "__main__":
    main()
