"""
Property API routes, including the filtered search.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_session
from schemas.property import PropertyCreate, PropertyUpdate, PropertyFilter, PropertyResponse
from schemas.property_image import PropertyImageResponse
from schemas.property_trace import PropertyTraceResponse
from services.property_service import PropertyService
from .property_images import build_image_response

router = APIRouter(prefix="/api/properties", tags=["properties"])


def _property_not_found(property_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_404_NOT_FOUND,
          detail=f"Property with ID {property_id} not found"
     )


def _owner_missing(owner_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_400_BAD_REQUEST,
          detail=f"Owner with ID {owner_id} does not exist"
     )


@router.get("", response_model=List[PropertyResponse], summary="List all properties")
def list_properties(db: Session = Depends(get_session)):
     return PropertyService.get_all(db)


@router.get("/filter", response_model=List[PropertyResponse], summary="Search properties")
def filter_properties(
     min_price: Optional[int] = Query(None, description="Lowest price, inclusive"),
     max_price: Optional[int] = Query(None, description="Highest price, inclusive"),
     year: Optional[int] = Query(None, description="Exact build year"),
     name: Optional[str] = Query(None, max_length=255, description="Substring of the name"),
     db: Session = Depends(get_session),
):
     """
     Return the properties matching every filter supplied.

     Filters left out impose no constraint; with none at all this is the
     same list as GET /api/properties.
     """
     criteria = PropertyFilter(min_price=min_price, max_price=max_price, year=year, name=name)
     return PropertyService.filter(db, criteria)


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get property by ID")
def get_property(property_id: int, db: Session = Depends(get_session)):
     prop = PropertyService.get_by_id(db, property_id)
     if not prop:
          raise _property_not_found(property_id)
     return prop


@router.get(
     "/{property_id}/images",
     response_model=List[PropertyImageResponse],
     summary="List the images of a property"
)
def list_property_images(property_id: int, db: Session = Depends(get_session)):
     images = PropertyService.get_images(db, property_id)
     if images is None:
          raise _property_not_found(property_id)
     return [build_image_response(image) for image in images]


@router.get(
     "/{property_id}/traces",
     response_model=List[PropertyTraceResponse],
     summary="List the sale history of a property"
)
def list_property_traces(property_id: int, db: Session = Depends(get_session)):
     traces = PropertyService.get_traces(db, property_id)
     if traces is None:
          raise _property_not_found(property_id)
     return traces


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new property"
)
def create_property(property_data: PropertyCreate, db: Session = Depends(get_session)):
     """
     Create a property.

     - **price**: must be positive
     - **year**: between 1800 and 2024
     - **owner_id**: must reference an existing owner
     """
     prop = PropertyService.add(db, property_data)
     if prop is None:
          raise _owner_missing(property_data.owner_id)
     return prop


@router.put(
     "/{property_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Replace a property's fields"
)
def update_property(
     property_id: int,
     property_data: PropertyUpdate,
     db: Session = Depends(get_session),
):
     """
     Overwrite every field of a property. The id in the path selects the row.
     """
     if PropertyService.get_by_id(db, property_id) is None:
          raise _property_not_found(property_id)
     if not PropertyService.update(db, property_id, property_data):
          raise _owner_missing(property_data.owner_id)
     return None


@router.delete(
     "/{property_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete property"
)
def delete_property(property_id: int, db: Session = Depends(get_session)):
     """
     Delete a property by ID, together with its images and traces.
     """
     if not PropertyService.delete(db, property_id):
          raise _property_not_found(property_id)
     return None
