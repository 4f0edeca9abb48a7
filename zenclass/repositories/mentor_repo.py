"""Mentor Repository - Data Access Layer (SoC)"""
from typing import Dict, List

from zenclass.repositories.base_repo import BaseRepo
from zenclass.repositories.pipelines import build_mentees_count_pipeline


class MentorRepo(BaseRepo):
    collection_key = 'mentors'

    def find_with_mentees_above(self, threshold: int) -> List[Dict]:
        return self.aggregate(build_mentees_count_pipeline(threshold))
