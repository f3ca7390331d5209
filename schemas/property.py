"""
Pydantic schemas for Property API request/response validation.
"""
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models.property import MIN_YEAR, MAX_YEAR


class PropertyCreate(BaseModel):
     """Schema for creating a new property."""
     name: str = Field(..., min_length=1, max_length=255, description="Property name")
     address: str = Field(..., min_length=1, max_length=255, description="Property address")
     price: int = Field(..., gt=0, description="Listing price (must be positive)")
     code_internal: str = Field(..., min_length=1, max_length=100, description="Internal reference code")
     year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, description="Build year")
     owner_id: int = Field(..., gt=0, description="Owner ID (must exist)")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Modern Villa",
                    "address": "789 Pine Road",
                    "price": 500000,
                    "code_internal": "MODV123",
                    "year": 2015,
                    "owner_id": 1
               }
          }
     )


class PropertyUpdate(PropertyCreate):
     """Full replacement of a property's fields, owner included."""
     pass


class PropertyFilter(BaseModel):
     """
     Optional criteria for the property search.
     Every field left as None imposes no constraint.
     """
     min_price: Optional[int] = Field(None, description="Lowest price, inclusive")
     max_price: Optional[int] = Field(None, description="Highest price, inclusive")
     year: Optional[int] = Field(None, description="Exact build year")
     name: Optional[str] = Field(None, max_length=255, description="Substring of the property name")


class PropertyResponse(BaseModel):
     """Schema for property response."""
     id: int
     name: str
     address: str
     price: int
     code_internal: str
     year: int
     owner_id: int

     model_config = ConfigDict(from_attributes=True)
