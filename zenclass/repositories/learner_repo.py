"""Learner Repository - Data Access Layer (SoC)"""
from typing import Dict, List

from zenclass.repositories.base_repo import BaseRepo

# Fields exposed when a learner is expanded inside another record
LEARNER_SUMMARY_PROJECTION = {"name": 1, "email": 1, "enrollmentDate": 1}


class LearnerRepo(BaseRepo):
    collection_key = 'learners'

    def find_summaries(self, learner_ids: List) -> Dict[str, Dict]:
        return self.find_by_ids(learner_ids, LEARNER_SUMMARY_PROJECTION)
