import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from contact_api.config import Settings

log = logging.getLogger(__name__)


def create_client(settings: Settings) -> AsyncIOMotorClient:
    if not settings.mongo_uri:
        log.warning("MONGO_URI is not set, falling back to the driver default (localhost:27017)")
    # motor connects lazily; nothing here touches the network
    return AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )


def get_contacts_collection(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorCollection:
    db = client[settings.mongo_db_name]
    return db[settings.mongo_collection]


async def check_connection(client: AsyncIOMotorClient) -> bool:
    """Ping the server once. Failures are logged and reported, never raised."""
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        log.error(f"Could not connect to MongoDB: {e}")
        return False
    log.info("Connected to MongoDB")
    return True
