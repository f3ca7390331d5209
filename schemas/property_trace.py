"""
Pydantic schemas for PropertyTrace API request/response validation.
"""
from datetime import date
from pydantic import BaseModel, Field, ConfigDict


class PropertyTraceCreate(BaseModel):
     """Schema for recording a property sale."""
     date_sale: date = Field(..., description="Date of the sale")
     name: str = Field(..., min_length=1, max_length=255, description="Label for the sale")
     value: int = Field(..., gt=0, description="Sale value (must be positive)")
     tax: int = Field(..., gt=0, description="Tax paid (must be positive)")
     property_id: int = Field(..., gt=0, description="Property ID (must exist)")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "date_sale": "2020-07-15",
                    "name": "Initial Sale",
                    "value": 450000,
                    "tax": 45000,
                    "property_id": 1
               }
          }
     )


class PropertyTraceUpdate(PropertyTraceCreate):
     """Full replacement of a trace's fields, property included."""
     pass


class PropertyTraceResponse(BaseModel):
     """Schema for property trace response."""
     id: int
     date_sale: date
     name: str
     value: int
     tax: int
     property_id: int

     model_config = ConfigDict(from_attributes=True)
