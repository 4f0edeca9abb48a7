"""Attendance API - Presentation Layer (SoC)"""
from flask_restful import Resource

from zenclass.exceptions.error_handler import handle_service_error
from zenclass.services.attendance_service import AttendanceReportService


class AbsentWithoutTaskCount(Resource):
    """GET /users/absent-no-task"""

    def __init__(self):
        self.service = AttendanceReportService()

    def get(self):
        try:
            return self.service.count_absent_without_submission(), 200
        except Exception as e:
            return handle_service_error(e)
