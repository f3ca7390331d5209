"""
PropertyTrace API routes (sale history).
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_session
from schemas.property_trace import PropertyTraceCreate, PropertyTraceUpdate, PropertyTraceResponse
from services.property_trace_service import PropertyTraceService

router = APIRouter(prefix="/api/property-traces", tags=["property-traces"])


def _trace_not_found(trace_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_404_NOT_FOUND,
          detail=f"Property trace with ID {trace_id} not found"
     )


def _property_missing(property_id: int) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_400_BAD_REQUEST,
          detail=f"Property with ID {property_id} does not exist"
     )


@router.get("", response_model=List[PropertyTraceResponse], summary="List all property traces")
def list_property_traces(db: Session = Depends(get_session)):
     return PropertyTraceService.get_all(db)


@router.get("/{trace_id}", response_model=PropertyTraceResponse, summary="Get property trace by ID")
def get_property_trace(trace_id: int, db: Session = Depends(get_session)):
     trace = PropertyTraceService.get_by_id(db, trace_id)
     if not trace:
          raise _trace_not_found(trace_id)
     return trace


@router.post(
     "",
     response_model=PropertyTraceResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a property sale"
)
def create_property_trace(trace_data: PropertyTraceCreate, db: Session = Depends(get_session)):
     """
     Record a sale.

     - **value**, **tax**: must be positive
     - **property_id**: must reference an existing property
     """
     trace = PropertyTraceService.add(db, trace_data)
     if trace is None:
          raise _property_missing(trace_data.property_id)
     return trace


@router.put(
     "/{trace_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Replace a property trace's fields"
)
def update_property_trace(
     trace_id: int,
     trace_data: PropertyTraceUpdate,
     db: Session = Depends(get_session),
):
     if PropertyTraceService.get_by_id(db, trace_id) is None:
          raise _trace_not_found(trace_id)
     if not PropertyTraceService.update(db, trace_id, trace_data):
          raise _property_missing(trace_data.property_id)
     return None


@router.delete(
     "/{trace_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete property trace"
)
def delete_property_trace(trace_id: int, db: Session = Depends(get_session)):
     if not PropertyTraceService.delete(db, trace_id):
          raise _trace_not_found(trace_id)
     return None
