"""Load the sample data set into the configured database."""
import argparse
import sys

from pymongo.errors import PyMongoError

from zenclass.db.db_utils import create_mongo_client, ping, resolve_database
from zenclass.db.seed import seed_sample_data
from zenclass.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--drop", action="store_true", help="empty each collection before inserting")
    args = parser.parse_args()

    logger = setup_logging()
    client = create_mongo_client()
    try:
        ping(client)
        counts = seed_sample_data(resolve_database(client), drop_existing=args.drop)
        logger.info(f"Seeding completed: {sum(counts.values())} documents")
    except PyMongoError as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
