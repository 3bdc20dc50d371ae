import asyncio
from types import SimpleNamespace

from pymongo.errors import ServerSelectionTimeoutError

from contact_api.config import Settings
from contact_api.db.mongo import check_connection, create_client, get_contacts_collection


class StubAdmin:
    def __init__(self, error=None):
        self.error = error

    async def command(self, name):
        if self.error:
            raise self.error
        return {"ok": 1.0}


def test_check_connection_ok():
    client = SimpleNamespace(admin=StubAdmin())
    assert asyncio.run(check_connection(client)) is True


def test_check_connection_failure_is_not_raised(caplog):
    client = SimpleNamespace(admin=StubAdmin(ServerSelectionTimeoutError("timed out")))
    assert asyncio.run(check_connection(client)) is False
    assert "Could not connect to MongoDB" in caplog.text


def test_contacts_collection_names():
    settings = Settings(mongo_uri="mongodb://localhost:27017", mongo_db_name="crm", mongo_collection="people")
    client = create_client(settings)
    try:
        collection = get_contacts_collection(client, settings)
        assert collection.name == "people"
        assert collection.database.name == "crm"
    finally:
        client.close()
