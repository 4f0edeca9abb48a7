"""Tests for GET /mentors/with-mentees-count."""
from bson import ObjectId

from zenclass.models.documents import DocumentFactory

URL = "/mentors/with-mentees-count"


def _mentor(name, mentee_count, expertise="JavaScript"):
    return DocumentFactory.mentor(
        name, f"{name.lower()}@zenclass.dev", expertise,
        mentees=[ObjectId() for _ in range(mentee_count)],
    )


class TestMentorsWithMenteesCount:

    def test_threshold_is_strictly_greater_than_fifteen(self, client, insert):
        insert("mentors", _mentor("Fifteen", 15), _mentor("Sixteen", 16), _mentor("Forty", 40))

        response = client.get(URL)

        assert response.status_code == 200
        counts = {m["name"]: m["menteesCount"] for m in response.get_json()}
        assert counts == {"Sixteen": 16, "Forty": 40}

    def test_projection(self, client, insert):
        mentor = _mentor("Meera", 17, expertise="React, Node")
        insert("mentors", mentor)

        result = client.get(URL).get_json()

        assert result == [{
            "_id": str(mentor["_id"]),
            "name": "Meera",
            "email": "meera@zenclass.dev",
            "expertise": "React, Node",
            "menteesCount": 17,
        }]

    def test_missing_mentee_list_counts_as_zero(self, client, db):
        db["mentors"].insert_one({"name": "New", "email": "new@zenclass.dev"})
        db["mentors"].insert_one({"name": "Null", "email": "null@zenclass.dev", "mentees": None})

        response = client.get(URL)

        assert response.status_code == 200
        assert response.get_json() == []
