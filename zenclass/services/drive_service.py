"""Company Drive Service - recruiting drives by date and with their attendees"""
from typing import Dict, List, Optional

from zenclass.repositories.repository_factory import RepositoryFactory
from zenclass.utils.date_utils import resolve_date_range
from zenclass.utils.json_utils import sanitize_mongo_document
from zenclass.utils.reference_utils import collect_references, expand_references


class CompanyDriveService:
    def __init__(self, repo_factory: RepositoryFactory = None):
        self.repo_factory = repo_factory or RepositoryFactory()

    def get_drives_in_range(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> List[Dict]:
        start, end = resolve_date_range(start_date, end_date)
        drives = self.repo_factory.get_company_drive_repo().find_between(start, end)
        return sanitize_mongo_document(drives)

    def get_drives_with_students(self) -> List[Dict]:
        drives = self.repo_factory.get_company_drive_repo().find_all()
        if not drives:
            return []

        learner_ids = collect_references(drives, "appearedStudents")
        learners_by_id = self.repo_factory.get_learner_repo().find_summaries(learner_ids)
        for drive in drives:
            drive["appearedStudents"] = expand_references(drive.get("appearedStudents"), learners_by_id)

        return sanitize_mongo_document(drives)
