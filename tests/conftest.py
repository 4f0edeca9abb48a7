"""Shared fixtures: the application wired to an in-memory MongoDB."""
from datetime import datetime

import mongomock
import pytest

from zenclass.app import create_app
from zenclass.db.db_utils import COLLECTIONS
from zenclass.models.documents import DocumentFactory


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def db(mongo_client):
    return mongo_client["zenclass_test"]


@pytest.fixture
def app(mongo_client, db):
    return create_app(mongo_client=mongo_client, database=db, testing=True)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def insert(db):
    """Insert documents into a collection by logical name; returns them."""
    def _insert(collection_key, *documents):
        db[COLLECTIONS[collection_key]].insert_many(list(documents))
        return documents[0] if len(documents) == 1 else list(documents)
    return _insert


@pytest.fixture
def learner(insert):
    """A single enrolled learner."""
    return insert(
        "learners",
        DocumentFactory.learner("Asha Menon", "asha@example.com", datetime(2020, 9, 1)),
    )
