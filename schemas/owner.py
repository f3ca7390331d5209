"""
Pydantic schemas for Owner API request/response validation.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class OwnerCreate(BaseModel):
     """Owner fields supplied on creation; the photo travels as a separate upload."""
     name: str = Field(..., min_length=1, max_length=255, description="Owner's full name")
     address: str = Field(..., min_length=1, max_length=255, description="Owner's address")
     birthday: date = Field(..., description="Owner's date of birth")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "John Doe",
                    "address": "123 Elm Street",
                    "birthday": "1975-08-15"
               }
          }
     )


class OwnerUpdate(OwnerCreate):
     """Full replacement of an owner's fields (no partial updates)."""
     pass


class OwnerResponse(BaseModel):
     """Schema for owner response. The photo is base64 encoded."""
     id: int
     name: str
     address: str
     birthday: date
     photo: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "id": 1,
                    "name": "John Doe",
                    "address": "123 Elm Street",
                    "birthday": "1975-08-15",
                    "photo": None
               }
          }
     )
