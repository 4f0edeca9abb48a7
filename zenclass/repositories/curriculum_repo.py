"""Curriculum Repository (topics and their tasks) - Data Access Layer (SoC)"""
from datetime import datetime
from typing import Dict, List

from zenclass.repositories.base_repo import BaseRepo
from zenclass.repositories.pipelines import build_task_window_query


class TopicRepo(BaseRepo):
    collection_key = 'topics'

    def find_all(self) -> List[Dict]:
        return self.find_many({})


class TaskRepo(BaseRepo):
    collection_key = 'tasks'

    def find_for_window(self, start: datetime, end: datetime) -> List[Dict]:
        """Candidate tasks for the absence report, only the fields it reads"""
        return self.find_many(
            build_task_window_query(start, end),
            {"_id": 1, "submittedBy": 1, "status": 1}
        )
