"""
Registration input schema
"""

from pydantic import BaseModel, EmailStr, Field

from eventease.models import Registration

__all__ = ["RegistrationCreate", "PHONE_PATTERN"]

# Optional leading +, then digits with common separators
PHONE_PATTERN = r"^\+?[0-9 ().\-]*[0-9][0-9 ().\-]*$"

class RegistrationCreate(BaseModel):
    """Schema for registering an attendee"""
    event_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    contact_number: str = Field(..., min_length=10, max_length=20, pattern=PHONE_PATTERN)

    def to_record(self) -> Registration:
        return Registration(
            event_id=self.event_id,
            name=self.name,
            email=str(self.email),
            contact_number=self.contact_number,
        )
