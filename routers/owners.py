"""
Owner API routes.

Owners are created and updated with multipart forms so a photo can be
uploaded alongside the fields. Deleting an owner also deletes its
properties and their images and traces.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from database import get_session
from models import Owner
from schemas.owner import OwnerCreate, OwnerUpdate, OwnerResponse
from schemas.property import PropertyResponse
from services.owner_service import OwnerService
from utils.uploads import read_upload, encode_binary

router = APIRouter(prefix="/api/owners", tags=["owners"])


def _build_owner_response(owner: Owner) -> OwnerResponse:
     return OwnerResponse(
          id=owner.id,
          name=owner.name,
          address=owner.address,
          birthday=owner.birthday,
          photo=encode_binary(owner.photo),
     )


def _owner_not_found(owner_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_404_NOT_FOUND,
          detail=f"Owner with ID {owner_id} not found"
     )


@router.get("", response_model=List[OwnerResponse], summary="List all owners")
def list_owners(db: Session = Depends(get_session)):
     return [_build_owner_response(owner) for owner in OwnerService.get_all(db)]


@router.get("/{owner_id}", response_model=OwnerResponse, summary="Get owner by ID")
def get_owner(owner_id: int, db: Session = Depends(get_session)):
     owner = OwnerService.get_by_id(db, owner_id)
     if not owner:
          raise _owner_not_found(owner_id)
     return _build_owner_response(owner)


@router.get(
     "/{owner_id}/properties",
     response_model=List[PropertyResponse],
     summary="List the properties of an owner"
)
def list_owner_properties(owner_id: int, db: Session = Depends(get_session)):
     properties = OwnerService.get_properties(db, owner_id)
     if properties is None:
          raise _owner_not_found(owner_id)
     return properties


@router.post(
     "",
     response_model=OwnerResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new owner"
)
async def create_owner(
     name: str = Form(..., min_length=1, max_length=255),
     address: str = Form(..., min_length=1, max_length=255),
     birthday: date = Form(...),
     photo: Optional[UploadFile] = File(None),
     db: Session = Depends(get_session),
):
     """
     Create an owner.

     - **name**, **address**, **birthday**: required form fields
     - **photo**: optional image file, stored as raw bytes
     """
     photo_bytes = await read_upload(photo)
     owner = OwnerService.add(
          db,
          OwnerCreate(name=name, address=address, birthday=birthday),
          photo_bytes,
     )
     return _build_owner_response(owner)


@router.put(
     "/{owner_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Replace an owner's fields"
)
async def update_owner(
     owner_id: int,
     name: str = Form(..., min_length=1, max_length=255),
     address: str = Form(..., min_length=1, max_length=255),
     birthday: date = Form(...),
     photo: Optional[UploadFile] = File(None),
     db: Session = Depends(get_session),
):
     """
     Overwrite every field of an owner. Sending no photo clears the stored one.
     """
     photo_bytes = await read_upload(photo)
     updated = OwnerService.update(
          db,
          owner_id,
          OwnerUpdate(name=name, address=address, birthday=birthday),
          photo_bytes,
     )
     if not updated:
          raise _owner_not_found(owner_id)
     return None


@router.delete(
     "/{owner_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete owner"
)
def delete_owner(owner_id: int, db: Session = Depends(get_session)):
     """
     Delete an owner by ID.

     Note: This also removes the owner's properties with their images and traces.
     """
     if not OwnerService.delete(db, owner_id):
          raise _owner_not_found(owner_id)
     return None
