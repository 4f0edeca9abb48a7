"""Attendance Repository - Data Access Layer (SoC)"""
from datetime import datetime
from typing import Dict, List

from zenclass.repositories.base_repo import BaseRepo
from zenclass.repositories.pipelines import build_absent_attendance_query


class AttendanceRepo(BaseRepo):
    collection_key = 'attendance'

    def find_absences(self, start: datetime, end: datetime) -> List[Dict]:
        return self.find_many(build_absent_attendance_query(start, end), {"user": 1})
