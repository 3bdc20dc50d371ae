from typing import List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from contact_api.models.contact import ContactCreate, ContactResponse


def _object_id(contact_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(contact_id)
    except (InvalidId, TypeError):
        return None


class ContactRepository:
    """CRUD calls over one contacts collection.

    Every method round-trips to the store and lets ``PyMongoError`` propagate;
    the routes decide which status code a failure becomes.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def list_all(self) -> List[ContactResponse]:
        contacts = []
        async for doc in self.collection.find():
            contacts.append(ContactResponse.from_document(doc))
        return contacts

    async def create(self, contact: ContactCreate) -> ContactResponse:
        new_contact = contact.model_dump()
        result = await self.collection.insert_one(new_contact)
        return ContactResponse(id=str(result.inserted_id), **contact.model_dump())

    async def replace(self, contact_id: str, contact: ContactCreate) -> Optional[ContactResponse]:
        # All four fields are written, so anything missing from the request is cleared
        object_id = _object_id(contact_id)
        if object_id is None:
            return None

        doc = await self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": contact.model_dump()},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        return ContactResponse.from_document(doc)

    async def delete(self, contact_id: str) -> None:
        object_id = _object_id(contact_id)
        if object_id is None:
            return
        await self.collection.delete_one({"_id": object_id})

    async def ping(self) -> None:
        await self.collection.database.command("ping")
