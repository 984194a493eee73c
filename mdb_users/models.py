"""
Data models for the user service.

User is both the HTTP body shape and the in-process record. MongoDB stores
the identifier under ``_id`` as an ObjectId; the model exposes it as a hex
string under ``id``.
"""

from typing import Any

from pydantic import BaseModel


class User(BaseModel):
    """
    A user record.

    ``id`` is assigned by MongoDB on insert. It is ignored when a User
    arrives as a create or update body.
    """

    id: str | None = None
    name: str
    location: str
    title: str

    def to_document(self) -> dict[str, Any]:
        """Convert to a MongoDB document without the identifier."""
        return {
            "name": self.name,
            "location": self.location,
            "title": self.title,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "User":
        """Create a User from a MongoDB document, dropping unknown keys."""
        data = dict(doc)
        if "_id" in data:
            data["id"] = str(data.pop("_id"))

        field_names = set(cls.model_fields)
        return cls(**{k: v for k, v in data.items() if k in field_names})


class InsertAcknowledgment(BaseModel):
    """Body returned by a successful create."""

    inserted_id: str
