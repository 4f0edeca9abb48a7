"""Codekata (coding practice progress) Repository - Data Access Layer (SoC)"""
from typing import Dict, Optional

from bson import ObjectId

from zenclass.repositories.base_repo import BaseRepo


class CodekataRepo(BaseRepo):
    collection_key = 'codekata'

    def find_by_learner(self, learner_id: ObjectId) -> Optional[Dict]:
        return self.find_one({"user": learner_id})
