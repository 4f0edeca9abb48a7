"""Create the indexes the reporting queries rely on."""
import sys

from pymongo.errors import PyMongoError

from zenclass.db.db_utils import create_mongo_client, ping, resolve_database
from zenclass.db.indexes import ensure_indexes
from zenclass.logging_config import setup_logging


def main():
    logger = setup_logging()
    client = create_mongo_client()
    try:
        ping(client)
        created = ensure_indexes(resolve_database(client))
        logger.info(f"Index creation completed: {len(created)} indexes ensured")
    except PyMongoError as e:
        logger.error(f"Index creation failed: {e}")
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
