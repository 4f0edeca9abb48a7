"""Company Drive API - Presentation Layer (SoC)"""
from flask import request
from flask_restful import Resource

from zenclass.exceptions.error_handler import handle_service_error
from zenclass.services.drive_service import CompanyDriveService


class CompanyDrivesByDateRange(Resource):
    """GET /company-drives/date-range?startDate=&endDate="""

    def __init__(self):
        self.service = CompanyDriveService()

    def get(self):
        try:
            start_date = request.args.get("startDate")
            end_date = request.args.get("endDate")
            return self.service.get_drives_in_range(start_date, end_date), 200
        except Exception as e:
            return handle_service_error(e)


class CompanyDrivesWithStudents(Resource):
    """GET /company-drives-with-students"""

    def __init__(self):
        self.service = CompanyDriveService()

    def get(self):
        try:
            return self.service.get_drives_with_students(), 200
        except Exception as e:
            return handle_service_error(e)
