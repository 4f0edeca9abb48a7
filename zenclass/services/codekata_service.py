"""Codekata Service - coding practice progress per learner"""
from typing import Dict

from zenclass.exceptions.exceptions import RecordNotFoundError
from zenclass.repositories.repository_factory import RepositoryFactory
from zenclass.utils.validation_utils import validate_object_id


class CodekataService:
    def __init__(self, repo_factory: RepositoryFactory = None):
        self.repo_factory = repo_factory or RepositoryFactory()

    def get_problems_solved(self, user_id: str) -> Dict:
        learner_id = validate_object_id(user_id, "Invalid user ID")

        record = self.repo_factory.get_codekata_repo().find_by_learner(learner_id)
        if not record:
            raise RecordNotFoundError("Codekata record not found for user")

        return {"userId": user_id, "problemsSolved": record.get("problemsSolved", 0)}
