"""User Schemas — create/update payloads and the public user representation.

Invariants:
    - UserCreate requires every field except experience
    - UserUpdate accepts any subset; only fields actually sent are applied
    - email validated with EmailStr on both payloads
"""

from datetime import datetime

from pydantic import EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

from app.core.domain_types import Gender, Seniority
from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    """Payload for POST /users."""
    first_name: str = Field(max_length=255, examples=["Juan"])
    last_name: str = Field(max_length=255, examples=["Perez"])
    email: EmailStr = Field(examples=["juan.perez@mail.com"])
    gender: Gender = Field(examples=[Gender.MALE])
    seniority: Seniority = Field(examples=[Seniority.SEMI_SENIOR])
    experience: str | None = Field(
        None, examples=["3 years of experience in software development"],
    )


class UserUpdate(CamelModel):
    """Payload for PUT /users/{id} — partial update."""
    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    email: EmailStr | None = None
    gender: Gender | None = None
    seniority: Seniority | None = None
    experience: str | None = None

    @model_validator(mode="after")
    def reject_null_required(self) -> "UserUpdate":
        """experience may be cleared with null; the other columns are NOT NULL."""
        for name in ("first_name", "last_name", "email", "gender", "seniority"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class UserResponse(CamelModel):
    """Public user representation."""
    id: int
    first_name: str
    last_name: str
    email: str
    gender: Gender
    seniority: Seniority
    experience: str | None = None
    created_at: datetime
    updated_at: datetime


class DeleteResponse(CamelModel):
    success: bool = True
