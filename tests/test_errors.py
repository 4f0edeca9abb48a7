"""Routing misses, store failures and repeatability across every endpoint."""

import pytest
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from zenclass.db.seed import seed_sample_data
from zenclass.repositories.base_repo import BaseRepo
from zenclass.repositories.repository_factory import RepositoryFactory

ENDPOINTS = [
    "/topics-tasks/october",
    "/company-drives/date-range",
    "/company-drives/date-range?startDate=2020-10-01T00:00:00Z&endDate=2020-10-20T00:00:00Z",
    "/company-drives-with-students",
    "/mentors/with-mentees-count",
    "/users/absent-no-task",
]

NOT_FOUND = {"error": "Endpoint not found"}
SERVER_ERROR = {"error": "Internal server error"}


class TestRoutingMisses:

    @pytest.mark.parametrize("path", ["/", "/nope", "/topics-tasks/september", "/codekata/problems-solved/"])
    def test_unknown_path(self, client, path):
        response = client.get(path)
        assert response.status_code == 404
        assert response.get_json() == NOT_FOUND

    def test_unsupported_method_is_a_routing_miss(self, client):
        response = client.post("/users/absent-no-task")
        assert response.status_code == 404
        assert response.get_json() == NOT_FOUND


class TestStoreFailures:

    @pytest.fixture
    def broken_store(self, monkeypatch):
        def boom(*args, **kwargs):
            raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
        for name in ("find_one", "find_many", "aggregate"):
            monkeypatch.setattr(BaseRepo, name, boom)

    @pytest.mark.parametrize("path", ENDPOINTS)
    def test_store_error_returns_fixed_body(self, client, broken_store, path):
        response = client.get(path)

        assert response.status_code == 500
        assert response.get_json() == SERVER_ERROR
        assert b"Connection refused" not in response.data

    def test_codekata_store_error(self, client, broken_store):
        response = client.get("/codekata/problems-solved/5f8d0d55b54764421b7156c3")
        assert response.status_code == 500
        assert response.get_json() == SERVER_ERROR

    def test_driver_error_inside_repository(self, client, db, monkeypatch):
        class FailingCollection:
            def find(self, *args, **kwargs):
                raise PyMongoError("auth failed for user admin")

        monkeypatch.setattr(BaseRepo, "__init__",
                            lambda self, database: setattr(self, "collection", FailingCollection()))

        response = client.get("/topics-tasks/october")

        assert response.status_code == 500
        assert response.get_json() == SERVER_ERROR

    def test_failure_before_handler_runs(self, client, monkeypatch):
        def explode(self, db=None):
            raise RuntimeError("no database bound")
        monkeypatch.setattr(RepositoryFactory, "__init__", explode)

        response = client.get("/mentors/with-mentees-count")

        assert response.status_code == 500
        assert response.get_json() == SERVER_ERROR


class TestIdempotence:

    @pytest.mark.parametrize("path", ENDPOINTS)
    def test_repeated_calls_are_byte_identical(self, client, db, path):
        seed_sample_data(db)

        first = client.get(path)
        second = client.get(path)

        assert first.status_code == 200
        assert first.data == second.data

    def test_codekata_repeatable(self, client, db):
        seed_sample_data(db)
        learner_id = str(db["users"].find_one({"email": "learner05@example.com"})["_id"])

        first = client.get(f"/codekata/problems-solved/{learner_id}")
        second = client.get(f"/codekata/problems-solved/{learner_id}")

        assert first.get_json() == {"userId": learner_id, "problemsSolved": 12}
        assert first.data == second.data
