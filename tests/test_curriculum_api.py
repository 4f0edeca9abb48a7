"""Tests for GET /topics-tasks/october."""
from datetime import datetime

from bson import ObjectId

from zenclass.models.documents import DocumentFactory

URL = "/topics-tasks/october"


def _topic_names(response):
    return sorted(topic["name"] for topic in response.get_json())


class TestOctoberTopics:

    def test_empty_store_returns_empty_list(self, client):
        response = client.get(URL)
        assert response.status_code == 200
        assert response.get_json() == []

    def test_matches_october_of_any_year(self, client, insert):
        insert(
            "topics",
            DocumentFactory.topic("Closures", datetime(2019, 10, 3)),
            DocumentFactory.topic("Promises", datetime(2021, 10, 28)),
            DocumentFactory.topic("Hoisting", datetime(2021, 9, 30, 23, 59)),
            DocumentFactory.topic("Modules", datetime(2020, 11, 1)),
        )

        response = client.get(URL)

        assert response.status_code == 200
        assert _topic_names(response) == ["Closures", "Promises"]

    def test_month_boundaries(self, client, insert):
        insert(
            "topics",
            DocumentFactory.topic("First minute", datetime(2020, 10, 1, 0, 0)),
            DocumentFactory.topic("Last minute", datetime(2020, 10, 31, 23, 59, 59)),
            DocumentFactory.topic("Too late", datetime(2020, 11, 1, 0, 0)),
        )

        assert _topic_names(client.get(URL)) == ["First minute", "Last minute"]

    def test_tasks_are_expanded_in_reference_order(self, client, insert):
        first = DocumentFactory.task("Task A", "first", datetime(2020, 10, 2))
        second = DocumentFactory.task("Task B", "second", datetime(2020, 10, 3), status="pending")
        insert("tasks", first, second)
        insert("topics", DocumentFactory.topic("Express", datetime(2020, 10, 2),
                                               tasks=[second["_id"], first["_id"]]))

        topic = client.get(URL).get_json()[0]

        assert [task["title"] for task in topic["tasks"]] == ["Task B", "Task A"]
        assert topic["tasks"][0]["_id"] == str(second["_id"])
        assert topic["tasks"][0]["assignedDate"] == "2020-10-03T00:00:00.000Z"
        assert topic["teachingDate"] == "2020-10-02T00:00:00.000Z"

    def test_dangling_task_reference_is_dropped(self, client, insert):
        task = DocumentFactory.task("Real task", "exists", datetime(2020, 10, 2))
        insert("tasks", task)
        insert("topics", DocumentFactory.topic("React", datetime(2020, 10, 9),
                                               tasks=[ObjectId(), task["_id"]]))

        topic = client.get(URL).get_json()[0]

        assert [t["title"] for t in topic["tasks"]] == ["Real task"]

    def test_topic_without_teaching_date_is_skipped(self, client, db):
        db["topics"].insert_one({"name": "Undated", "tasks": []})
        assert client.get(URL).get_json() == []
