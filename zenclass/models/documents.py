"""Document Factory - builds valid documents for every collection (SoC)

The API is read-only; these factories are what the seed script and the
test-suite use to put well-formed records in the store.
"""
import re
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from bson import ObjectId

from zenclass.config.settings import ATTENDANCE_STATUSES, TASK_STATUSES
from zenclass.exceptions.exceptions import ValidationError
from zenclass.utils.date_utils import to_naive_utc

EMAIL_PATTERN = re.compile(
    r'^(([^<>()[\]\\.,;:\s@"]+(\.[^<>()[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@(([^<>()[\]\\.,;:\s@"]+\.)+[^<>()[\]\\.,;:\s@"]{2,})$'
)


def _text(value, field: str, max_length: int, required: bool = True) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise ValidationError(f"{field} is required")
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return value


def _email(value) -> str:
    email = _text(value, "email", 100).lower()
    if not EMAIL_PATTERN.match(email):
        raise ValidationError(f"Invalid email: {email}")
    return email


def _date(value, field: str, required: bool = True) -> Optional[datetime]:
    if value is None:
        if required:
            raise ValidationError(f"{field} is required")
        return None
    if not isinstance(value, datetime):
        raise ValidationError(f"{field} must be a datetime")
    return to_naive_utc(value)


def _refs(values: Optional[Iterable]) -> List[ObjectId]:
    return [ObjectId(v) for v in (values or [])]


def _choice(value, field: str, allowed) -> str:
    if value not in allowed:
        raise ValidationError(f"{field} must be one of: {', '.join(allowed)}")
    return value


class DocumentFactory:
    """One builder per entity; each stamps _id, createdAt and updatedAt."""

    @staticmethod
    def _stamp(doc: Dict, now: Optional[datetime] = None) -> Dict:
        now = now or datetime.utcnow().replace(microsecond=0)
        doc.setdefault("_id", ObjectId())
        doc["createdAt"] = now
        doc["updatedAt"] = now
        return doc

    @staticmethod
    def learner(name, email, enrollment_date, mentor=None, tasks_submitted=None,
                attendance_records=None, codekata_record=None, placement_status=False,
                _id=None) -> Dict:
        doc = {
            "name": _text(name, "name", 100),
            "email": _email(email),
            "enrollmentDate": _date(enrollment_date, "enrollmentDate"),
            "mentor": ObjectId(mentor) if mentor else None,
            "tasksSubmitted": _refs(tasks_submitted),
            "attendanceRecords": _refs(attendance_records),
            "placementStatus": bool(placement_status),
        }
        if codekata_record:
            doc["codekataRecord"] = ObjectId(codekata_record)
        if doc["mentor"] is None:
            del doc["mentor"]
        if _id:
            doc["_id"] = ObjectId(_id)
        return DocumentFactory._stamp(doc)

    @staticmethod
    def mentor(name, email, expertise=None, mentees=None, _id=None) -> Dict:
        doc = {
            "name": _text(name, "name", 100),
            "email": _email(email),
            "mentees": _refs(mentees),
        }
        expertise = _text(expertise, "expertise", 200, required=False)
        if expertise is not None:
            doc["expertise"] = expertise
        if _id:
            doc["_id"] = ObjectId(_id)
        return DocumentFactory._stamp(doc)

    @staticmethod
    def attendance(user, date, status, _id=None) -> Dict:
        doc = {
            "user": ObjectId(user),
            "date": _date(date, "date"),
            "status": _choice(status, "status", ATTENDANCE_STATUSES),
        }
        if _id:
            doc["_id"] = ObjectId(_id)
        return DocumentFactory._stamp(doc)

    @staticmethod
    def codekata(user, problems_solved=0, problem_details=None, _id=None) -> Dict:
        if not isinstance(problems_solved, int) or problems_solved < 0:
            raise ValidationError("problemsSolved must be a non-negative integer")
        details = []
        for detail in problem_details or []:
            details.append({
                "problemId": _text(detail.get("problemId"), "problemId", 100),
                "solvedDate": _date(detail.get("solvedDate"), "solvedDate"),
            })
        doc = {
            "user": ObjectId(user),
            "problemsSolved": problems_solved,
            "problemDetails": details,
        }
        if _id:
            doc["_id"] = ObjectId(_id)
        return DocumentFactory._stamp(doc)

    @staticmethod
    def topic(name, teaching_date, tasks=None, _id=None) -> Dict:
        doc = {
            "name": _text(name, "name", 150),
            "teachingDate": _date(teaching_date, "teachingDate"),
            "tasks": _refs(tasks),
        }
        if _id:
            doc["_id"] = ObjectId(_id)
        return DocumentFactory._stamp(doc)

    @staticmethod
    def task(title, description, assigned_date, submission_date=None, submitted_by=None,
             status="pending", _id=None) -> Dict:
        doc = {
            "title": _text(title, "title", 200),
            "description": _text(description, "description", 2000),
            "assignedDate": _date(assigned_date, "assignedDate"),
            "submittedBy": _refs(submitted_by),
            "status": _choice(status, "status", TASK_STATUSES),
        }
        submission_date = _date(submission_date, "submissionDate", required=False)
        if submission_date is not None:
            doc["submissionDate"] = submission_date
        if _id:
            doc["_id"] = ObjectId(_id)
        return DocumentFactory._stamp(doc)

    @staticmethod
    def company_drive(company_name, drive_date, appeared_students=None, _id=None) -> Dict:
        doc = {
            "companyName": _text(company_name, "companyName", 150),
            "driveDate": _date(drive_date, "driveDate"),
            "appearedStudents": _refs(appeared_students),
        }
        if _id:
            doc["_id"] = ObjectId(_id)
        return DocumentFactory._stamp(doc)
