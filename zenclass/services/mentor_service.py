"""Mentor Service - mentors by mentee count"""
from typing import Dict, List

from zenclass.config.settings import MENTEES_COUNT_THRESHOLD
from zenclass.repositories.repository_factory import RepositoryFactory
from zenclass.utils.json_utils import sanitize_mongo_document


class MentorService:
    def __init__(self, repo_factory: RepositoryFactory = None):
        self.repo_factory = repo_factory or RepositoryFactory()

    def get_mentors_with_mentees_count(self, threshold: int = MENTEES_COUNT_THRESHOLD) -> List[Dict]:
        mentors = self.repo_factory.get_mentor_repo().find_with_mentees_above(threshold)
        return sanitize_mongo_document(mentors)
