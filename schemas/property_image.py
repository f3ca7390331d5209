"""
Pydantic schemas for PropertyImage API request/response validation.
"""
from typing import Optional
from pydantic import BaseModel, Field


class PropertyImageCreate(BaseModel):
     property_id: int = Field(..., gt=0, description="Property ID (must exist)")
     enabled: bool = Field(default=True, description="Whether the image is shown")


class PropertyImageUpdate(BaseModel):
     """Only the enabled flag can change after upload."""
     enabled: bool


class PropertyImageResponse(BaseModel):
     """Schema for property image response. The file is base64 encoded."""
     id: int
     property_id: int
     enabled: bool
     file: Optional[str] = None
