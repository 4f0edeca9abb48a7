"""Tests for GET /codekata/problems-solved/<userId>."""
from bson import ObjectId

from zenclass.models.documents import DocumentFactory


def _url(user_id):
    return f"/codekata/problems-solved/{user_id}"


class TestProblemsSolved:

    def test_existing_record(self, client, insert, learner):
        insert("codekata", DocumentFactory.codekata(learner["_id"], problems_solved=42))

        response = client.get(_url(learner["_id"]))

        assert response.status_code == 200
        assert response.get_json() == {"userId": str(learner["_id"]), "problemsSolved": 42}

    def test_zero_is_returned_unchanged(self, client, insert, learner):
        insert("codekata", DocumentFactory.codekata(learner["_id"]))
        assert client.get(_url(learner["_id"])).get_json()["problemsSolved"] == 0

    def test_missing_count_defaults_to_zero(self, client, db, learner):
        db["codekatas"].insert_one({"user": learner["_id"], "problemDetails": []})
        assert client.get(_url(learner["_id"])).get_json()["problemsSolved"] == 0

    def test_malformed_id_returns_400(self, client):
        response = client.get(_url("not-an-object-id"))
        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid user ID"}

    def test_wrong_length_hex_returns_400(self, client):
        assert client.get(_url("5f8d0d55b54764421b7156c")).status_code == 400

    def test_well_formed_but_unknown_id_returns_404(self, client):
        response = client.get(_url(ObjectId()))
        assert response.status_code == 404
        assert response.get_json() == {"error": "Codekata record not found for user"}

    def test_record_of_another_learner_is_not_returned(self, client, insert, learner):
        insert("codekata", DocumentFactory.codekata(ObjectId(), problems_solved=7))
        assert client.get(_url(learner["_id"])).status_code == 404
