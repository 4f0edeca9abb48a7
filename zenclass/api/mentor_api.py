"""Mentor API - Presentation Layer (SoC)"""
from flask_restful import Resource

from zenclass.exceptions.error_handler import handle_service_error
from zenclass.services.mentor_service import MentorService


class MentorsWithMenteesCount(Resource):
    """GET /mentors/with-mentees-count"""

    def __init__(self):
        self.service = MentorService()

    def get(self):
        try:
            return self.service.get_mentors_with_mentees_count(), 200
        except Exception as e:
            return handle_service_error(e)
