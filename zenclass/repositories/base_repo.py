"""
Base Repository Class
Common read operations following DRY principle
"""
from typing import Dict, List, Optional

from pymongo.errors import PyMongoError

from zenclass.db.db_utils import COLLECTIONS
from zenclass.exceptions.exceptions import DatabaseError


class BaseRepo:
    """Read-only access to one collection; driver failures become DatabaseError"""

    collection_key: str = None

    def __init__(self, db):
        self.db = db
        self.collection = db[COLLECTIONS[self.collection_key]]

    def find_one(self, query: Dict, projection: Optional[Dict] = None) -> Optional[Dict]:
        """Find single document"""
        try:
            return self.collection.find_one(query, projection)
        except PyMongoError as e:
            raise DatabaseError(f"Database query failed: {str(e)}")

    def find_many(self, query: Dict, projection: Optional[Dict] = None) -> List[Dict]:
        """Find multiple documents"""
        try:
            return list(self.collection.find(query, projection))
        except PyMongoError as e:
            raise DatabaseError(f"Database query failed: {str(e)}")

    def aggregate(self, pipeline: List[Dict]) -> List[Dict]:
        """Execute aggregation pipeline"""
        try:
            return list(self.collection.aggregate(pipeline))
        except PyMongoError as e:
            raise DatabaseError(f"Database aggregation failed: {str(e)}")

    def find_by_ids(self, ids: List, projection: Optional[Dict] = None) -> Dict[str, Dict]:
        """Documents for the given _id values, keyed by their string id"""
        if not ids:
            return {}
        docs = self.find_many({"_id": {"$in": list(ids)}}, projection)
        return {str(doc["_id"]): doc for doc in docs}
