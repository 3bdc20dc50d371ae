import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from contact_api.db.contacts import ContactRepository
from contact_api.models.contact import ContactCreate, ContactResponse
from contact_api.utils.dependencies import get_contact_repository

log = logging.getLogger(__name__)

router = APIRouter(tags=["contacts"])


def _text(description: str) -> dict:
    return {"description": description, "content": {"text/plain": {"schema": {"type": "string"}}}}


# Get all contacts
@router.get(
    "/contacts",
    summary="List all contacts",
    response_model=List[ContactResponse],
    response_description="All contacts in storage order",
    responses={500: _text("Storage error")},
)
async def list_contacts(contacts: ContactRepository = Depends(get_contact_repository)):
    try:
        return await contacts.list_all()
    except (PyMongoError, ValidationError) as e:
        log.error(f"Error listing contacts: {e}")
        return PlainTextResponse("Server Error", status_code=500)


# Save a contact; a missing body creates an empty contact
@router.post(
    "/contacts",
    summary="Add a new contact",
    status_code=201,
    response_model=ContactResponse,
    response_description="Contact created",
    responses={400: _text("Contact could not be written")},
)
async def create_contact(
    contact: Optional[ContactCreate] = Body(None),
    contacts: ContactRepository = Depends(get_contact_repository),
):
    try:
        return await contacts.create(contact or ContactCreate())
    except PyMongoError as e:
        log.error(f"Error creating contact: {e}")
        return PlainTextResponse("Error creating contact", status_code=400)


# Replace the four fields of a contact; fields left out of the body are cleared
@router.put(
    "/contacts/{contact_id}",
    summary="Update a contact",
    response_model=ContactResponse,
    response_description="Contact updated",
    responses={404: _text("Contact not found"), 500: _text("Storage error")},
)
async def update_contact(
    contact_id: str,
    contact: Optional[ContactCreate] = Body(None),
    contacts: ContactRepository = Depends(get_contact_repository),
):
    try:
        updated = await contacts.replace(contact_id, contact or ContactCreate())
    except (PyMongoError, ValidationError) as e:
        log.error(f"Error updating contact {contact_id}: {e}")
        return PlainTextResponse("Error updating contact", status_code=500)

    if updated is None:
        return PlainTextResponse("Contact not found", status_code=404)
    return updated


@router.delete(
    "/contacts/{contact_id}",
    summary="Delete a contact",
    status_code=204,
    response_class=Response,
    response_description="Contact deleted",
    responses={500: _text("Storage error")},
)
async def delete_contact(contact_id: str, contacts: ContactRepository = Depends(get_contact_repository)):
    try:
        await contacts.delete(contact_id)
    except PyMongoError as e:
        log.error(f"Error deleting contact {contact_id}: {e}")
        return PlainTextResponse("Error deleting contact", status_code=500)
    return Response(status_code=204)


# Bodies the request parser rejects answer like a failed write on the same route
VALIDATION_ERRORS = {
    create_contact: (400, "Error creating contact"),
    update_contact: (500, "Error updating contact"),
}
