import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_restful import Api
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from zenclass.config.settings import CORS_ALLOW_ORIGINS
from zenclass.db.db_utils import create_mongo_client, ping, resolve_database
from zenclass.exceptions.error_handler import NOT_FOUND_MESSAGE, error_body, server_error

# Curriculum
from zenclass.api.curriculum_api import OctoberTopicsTasks

# Company drives
from zenclass.api.drive_api import CompanyDrivesByDateRange, CompanyDrivesWithStudents

# Codekata
from zenclass.api.codekata_api import ProblemsSolvedByUser

# Mentors
from zenclass.api.mentor_api import MentorsWithMenteesCount

# Attendance
from zenclass.api.attendance_api import AbsentWithoutTaskCount

logger = logging.getLogger(__name__)


class ZenClassApi(Api):
    """Api whose error responses use the fixed {"error": ...} bodies"""

    def handle_error(self, e):
        if isinstance(e, (NotFound, MethodNotAllowed)):
            return self.make_response(error_body(NOT_FOUND_MESSAGE), 404)
        if isinstance(e, HTTPException):
            return super().handle_error(e)
        body, code = server_error(e)
        return self.make_response(body, code)


class ZenClassFlask(Flask):
    """Flask app owning the MongoDB client for the process lifetime"""

    def __init__(self, *args, mongo_client=None, database=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.client = mongo_client if mongo_client is not None else create_mongo_client()
        self.db = database if database is not None else resolve_database(self.client)

    def check_connection(self):
        """Fail fast when the store is unreachable"""
        ping(self.client)
        logger.info(f"MongoDB connected successfully (database: {self.db.name})")

    def close(self):
        self.client.close()
        logger.info("MongoDB client closed")

    def add_api(self):
        api = ZenClassApi(self, catch_all_404s=True)

        # Curriculum APIs
        api.add_resource(OctoberTopicsTasks, "/topics-tasks/october")

        # Company drive APIs
        api.add_resource(CompanyDrivesByDateRange, "/company-drives/date-range")
        api.add_resource(CompanyDrivesWithStudents, "/company-drives-with-students")

        # Codekata APIs
        api.add_resource(ProblemsSolvedByUser, "/codekata/problems-solved/<string:user_id>")

        # Mentor APIs
        api.add_resource(MentorsWithMenteesCount, "/mentors/with-mentees-count")

        # Attendance APIs
        api.add_resource(AbsentWithoutTaskCount, "/users/absent-no-task")

        return api

    def add_error_handlers(self):
        @self.errorhandler(404)
        @self.errorhandler(405)
        def endpoint_not_found(e):
            return jsonify(error_body(NOT_FOUND_MESSAGE)), 404

        @self.errorhandler(Exception)
        def unhandled_error(e):
            if isinstance(e, HTTPException):
                return e
            body, code = server_error(e)
            return jsonify(body), code


def create_app(mongo_client=None, database=None, testing=False):
    """Build the application; the MongoDB client is created here unless injected."""
    app = ZenClassFlask(__name__, mongo_client=mongo_client, database=database)
    app.config['TESTING'] = testing
    app.add_api()
    app.add_error_handlers()
    CORS(app, origins=CORS_ALLOW_ORIGINS)
    return app
