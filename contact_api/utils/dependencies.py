from fastapi import Request

from contact_api.db.contacts import ContactRepository


def get_contact_repository(request: Request) -> ContactRepository:
    return request.app.state.contacts
