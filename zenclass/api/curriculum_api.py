"""Curriculum API - Presentation Layer (SoC)"""
from flask_restful import Resource

from zenclass.exceptions.error_handler import handle_service_error
from zenclass.services.curriculum_service import CurriculumService


class OctoberTopicsTasks(Resource):
    """GET /topics-tasks/october"""

    def __init__(self):
        self.service = CurriculumService()

    def get(self):
        try:
            return self.service.get_topics_for_month(), 200
        except Exception as e:
            return handle_service_error(e)
