"""
PropertyImage API routes.

Images are uploaded as multipart forms; afterwards only their enabled
flag can be changed.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from database import get_session
from models import PropertyImage
from schemas.property_image import PropertyImageCreate, PropertyImageUpdate, PropertyImageResponse
from services.property_image_service import PropertyImageService
from utils.uploads import read_upload, encode_binary

router = APIRouter(prefix="/api/property-images", tags=["property-images"])


def build_image_response(image: PropertyImage) -> PropertyImageResponse:
     return PropertyImageResponse(
          id=image.id,
          property_id=image.property_id,
          enabled=image.enabled,
          file=encode_binary(image.file),
     )


def _image_not_found(image_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_404_NOT_FOUND,
          detail=f"Property image with ID {image_id} not found"
     )


@router.get("", response_model=List[PropertyImageResponse], summary="List all property images")
def list_property_images(db: Session = Depends(get_session)):
     return [build_image_response(image) for image in PropertyImageService.get_all(db)]


@router.get("/{image_id}", response_model=PropertyImageResponse, summary="Get property image by ID")
def get_property_image(image_id: int, db: Session = Depends(get_session)):
     image = PropertyImageService.get_by_id(db, image_id)
     if not image:
          raise _image_not_found(image_id)
     return build_image_response(image)


@router.post(
     "",
     response_model=PropertyImageResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Upload a property image"
)
async def create_property_image(
     property_id: int = Form(..., gt=0),
     enabled: bool = Form(True),
     file: Optional[UploadFile] = File(None),
     db: Session = Depends(get_session),
):
     file_bytes = await read_upload(file)
     image = PropertyImageService.add(
          db,
          PropertyImageCreate(property_id=property_id, enabled=enabled),
          file_bytes,
     )
     if image is None:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail=f"Property with ID {property_id} does not exist"
          )
     return build_image_response(image)


@router.put(
     "/{image_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Enable or disable a property image"
)
def update_property_image(
     image_id: int,
     image_data: PropertyImageUpdate,
     db: Session = Depends(get_session),
):
     if not PropertyImageService.update(db, image_id, image_data):
          raise _image_not_found(image_id)
     return None


@router.delete(
     "/{image_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete property image"
)
def delete_property_image(image_id: int, db: Session = Depends(get_session)):
     if not PropertyImageService.delete(db, image_id):
          raise _image_not_found(image_id)
     return None
