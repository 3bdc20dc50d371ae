from pydantic import BaseModel, field_validator
from typing import Optional

CONTACT_FIELDS = ("firstName", "lastName", "email", "phone")


class ContactFields(BaseModel):
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    # Numbers and booleans are read and written as their string form, like a typed document schema casts them
    @field_validator(*CONTACT_FIELDS, mode="before")
    @classmethod
    def cast_scalars(cls, value):
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return value


# For inserting or replacing a contact
class ContactCreate(ContactFields):
    pass


# For reading a contact (e.g., in response)
class ContactResponse(ContactFields):
    id: str

    @classmethod
    def from_document(cls, doc: dict) -> "ContactResponse":
        return cls(id=str(doc["_id"]), **{field: doc.get(field) for field in CONTACT_FIELDS})
