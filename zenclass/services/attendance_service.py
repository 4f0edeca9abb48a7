"""Attendance Report Service - learners absent without a task submission

Correlates two independent record sets in application code:
absent attendance records and submitted tasks in the same window.
"""
import logging
from datetime import datetime
from typing import Dict, Set

from zenclass.config.settings import REPORT_WINDOW_END, REPORT_WINDOW_START
from zenclass.repositories.repository_factory import RepositoryFactory
from zenclass.utils.reference_utils import reference_key

logger = logging.getLogger(__name__)


class AttendanceReportService:
    def __init__(self, repo_factory: RepositoryFactory = None):
        self.repo_factory = repo_factory or RepositoryFactory()

    def _absent_learner_ids(self, start: datetime, end: datetime) -> Set[str]:
        absences = self.repo_factory.get_attendance_repo().find_absences(start, end)
        return {reference_key(record["user"]) for record in absences if record.get("user") is not None}

    def _submitted_learner_ids(self, absent_ids: Set[str], start: datetime, end: datetime) -> Set[str]:
        # Tasks without a submission date are candidates too; only "submitted" ones mark learners
        tasks = self.repo_factory.get_task_repo().find_for_window(start, end)
        submitted = set()
        for task in tasks:
            if task.get("status") != "submitted":
                continue
            for learner_ref in task.get("submittedBy") or []:
                learner_id = reference_key(learner_ref)
                if learner_id in absent_ids:
                    submitted.add(learner_id)
        return submitted

    def count_absent_without_submission(self, start: datetime = REPORT_WINDOW_START,
                                        end: datetime = REPORT_WINDOW_END) -> Dict:
        absent_ids = self._absent_learner_ids(start, end)
        if not absent_ids:
            return {"count": 0}

        submitted_ids = self._submitted_learner_ids(absent_ids, start, end)
        count = len(absent_ids - submitted_ids)
        logger.debug(f"{len(absent_ids)} absent learners, {len(submitted_ids)} submitted, {count} without submission")
        return {"count": count}
