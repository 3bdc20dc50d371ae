import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import DeleteResult, InsertOneResult

from contact_api.app import create_app
from contact_api.config import Settings


class FakeCursor:
    def __init__(self, collection):
        self.collection = collection
        self._docs = None

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._docs is None:
            self.collection.check()
            self._docs = [copy.deepcopy(doc) for doc in self.collection.docs.values()]
        if not self._docs:
            raise StopAsyncIteration
        return self._docs.pop(0)


class FakeDatabase:
    def __init__(self, collection):
        self.collection = collection

    async def command(self, name):
        self.collection.check()
        return {"ok": 1.0}


class FakeCollection:
    """The slice of the motor collection API the repository uses, kept in memory."""

    def __init__(self):
        self.docs = {}
        self.fail = False
        self.database = FakeDatabase(self)

    def check(self):
        if self.fail:
            raise ServerSelectionTimeoutError("No servers found yet")

    async def insert_one(self, document):
        self.check()
        document["_id"] = ObjectId()
        self.docs[document["_id"]] = copy.deepcopy(document)
        return InsertOneResult(document["_id"], True)

    def find(self, filter=None):
        return FakeCursor(self)

    async def find_one_and_update(self, filter, update, return_document=ReturnDocument.BEFORE):
        self.check()
        doc = self.docs.get(filter["_id"])
        if doc is None:
            return None
        before = copy.deepcopy(doc)
        doc.update(update["$set"])
        return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before

    async def delete_one(self, filter):
        self.check()
        removed = self.docs.pop(filter["_id"], None)
        return DeleteResult({"n": 0 if removed is None else 1, "ok": 1.0}, True)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def app(settings, collection):
    return create_app(settings, collection=collection)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
