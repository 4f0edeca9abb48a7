"""Codekata API - Presentation Layer (SoC)"""
from flask_restful import Resource

from zenclass.exceptions.error_handler import handle_service_error
from zenclass.services.codekata_service import CodekataService


class ProblemsSolvedByUser(Resource):
    """GET /codekata/problems-solved/<userId>"""

    def __init__(self):
        self.service = CodekataService()

    def get(self, user_id):
        try:
            return self.service.get_problems_solved(user_id), 200
        except Exception as e:
            return handle_service_error(e)
