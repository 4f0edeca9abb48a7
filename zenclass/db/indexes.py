import logging

from pymongo import ASCENDING

from zenclass.db.db_utils import COLLECTIONS

logger = logging.getLogger(__name__)

# Define the indexes to ensure: (keys, unique)
INDEXES = {
    COLLECTIONS['learners']: [
        ([('email', ASCENDING)], True),
        ([('mentor', ASCENDING)], False),
    ],
    COLLECTIONS['mentors']: [
        ([('email', ASCENDING)], True),
    ],
    COLLECTIONS['attendance']: [
        ([('user', ASCENDING)], False),
        ([('date', ASCENDING)], False),
    ],
    COLLECTIONS['codekata']: [
        ([('user', ASCENDING)], True),
    ],
    COLLECTIONS['topics']: [
        ([('teachingDate', ASCENDING)], False),
    ],
    COLLECTIONS['tasks']: [
        ([('assignedDate', ASCENDING)], False),
    ],
    COLLECTIONS['company_drives']: [
        ([('driveDate', ASCENDING)], False),
    ],
}


def ensure_indexes(db):
    """Create every index in INDEXES; returns the created index names."""
    created = []
    for coll_name, specs in INDEXES.items():
        collection = db[coll_name]
        for keys, unique in specs:
            name = collection.create_index(keys, unique=unique)
            logger.info(f"Ensured index {coll_name}.{name} (unique={unique})")
            created.append(f"{coll_name}.{name}")
    return created
