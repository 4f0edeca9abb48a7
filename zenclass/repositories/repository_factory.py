"""Repository Factory - DRY Implementation"""
from zenclass.db.db_utils import get_db
from zenclass.repositories.attendance_repo import AttendanceRepo
from zenclass.repositories.codekata_repo import CodekataRepo
from zenclass.repositories.curriculum_repo import TaskRepo, TopicRepo
from zenclass.repositories.drive_repo import CompanyDriveRepo
from zenclass.repositories.learner_repo import LearnerRepo
from zenclass.repositories.mentor_repo import MentorRepo


class RepositoryFactory:
    """Builds repositories over one database handle"""

    def __init__(self, db=None):
        self.db = db if db is not None else get_db()

    def get_learner_repo(self) -> LearnerRepo:
        return LearnerRepo(self.db)

    def get_mentor_repo(self) -> MentorRepo:
        return MentorRepo(self.db)

    def get_attendance_repo(self) -> AttendanceRepo:
        return AttendanceRepo(self.db)

    def get_codekata_repo(self) -> CodekataRepo:
        return CodekataRepo(self.db)

    def get_topic_repo(self) -> TopicRepo:
        return TopicRepo(self.db)

    def get_task_repo(self) -> TaskRepo:
        return TaskRepo(self.db)

    def get_company_drive_repo(self) -> CompanyDriveRepo:
        return CompanyDriveRepo(self.db)
