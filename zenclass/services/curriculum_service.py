"""Curriculum Service - topics taught in a calendar month with their tasks"""
import logging
from typing import Dict, List

from zenclass.config.settings import OCTOBER
from zenclass.repositories.repository_factory import RepositoryFactory
from zenclass.utils.date_utils import is_in_month
from zenclass.utils.json_utils import sanitize_mongo_document
from zenclass.utils.reference_utils import collect_references, expand_references

logger = logging.getLogger(__name__)


class CurriculumService:
    def __init__(self, repo_factory: RepositoryFactory = None):
        self.repo_factory = repo_factory or RepositoryFactory()

    def get_topics_for_month(self, month: int = OCTOBER) -> List[Dict]:
        # Month-only match has no range equivalent, so every topic is loaded
        topics = [
            topic for topic in self.repo_factory.get_topic_repo().find_all()
            if is_in_month(topic.get("teachingDate"), month)
        ]
        if not topics:
            return []

        task_ids = collect_references(topics, "tasks")
        tasks_by_id = self.repo_factory.get_task_repo().find_by_ids(task_ids)
        for topic in topics:
            topic["tasks"] = expand_references(topic.get("tasks"), tasks_by_id)

        logger.debug(f"{len(topics)} topics taught in month {month}")
        return sanitize_mongo_document(topics)
