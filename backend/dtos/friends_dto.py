"""
Friends DTO

Wire representation of a friend, decoupled from the Friend database model.
"""

from pydantic import BaseModel, Field, validator
from typing import Optional

from constants import MAX_ID, MIN_ID


class FriendsDTO(BaseModel):
    """
    DTO for the Friends resource, used for both requests and responses.

    Equality is identity-based: two DTOs are equal only when both carry
    the same non-null id. Two DTOs without ids are never equal.
    """

    id: Optional[int] = Field(None, ge=MIN_ID, le=MAX_ID, description="Friend ID (assigned by the server)")
    name: Optional[str] = Field(None, max_length=100, description="Display name")
    relationship: Optional[str] = Field(None, max_length=50, description="How you know this friend")
    email: Optional[str] = Field(None, max_length=254, description="Contact email")
    phone_number: Optional[str] = Field(None, max_length=32, description="Contact phone number")
    notes: Optional[str] = Field(None, description="Free-form notes")

    @validator("email")
    def validate_email(cls, v):
        """Reject obviously malformed addresses."""
        if v is not None and "@" not in v:
            raise ValueError("Email must contain '@'")
        return v

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, FriendsDTO):
            return False
        if self.id is None:
            return False
        return self.id == other.id

    def __hash__(self):
        # Constant per class: ids change after save, equality follows them
        return hash(type(self))

    def __str__(self) -> str:
        return (
            f"FriendsDTO{{id={self.id}, name='{self.name}', relationship='{self.relationship}', "
            f"email='{self.email}', phone_number='{self.phone_number}', notes='{self.notes}'}}"
        )

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models
        json_schema_extra = {
            "example": {
                "id": None,
                "name": "Alice",
                "relationship": "college",
                "email": "alice@example.com",
                "phone_number": "+1 555 0100",
                "notes": None
            }
        }
