"""
Property Trace Service - sale history of properties.
"""
from typing import Optional
from sqlalchemy.orm import Session

from models import PropertyTrace
from repositories import PropertyRepository, PropertyTraceRepository
from schemas.property_trace import PropertyTraceCreate, PropertyTraceUpdate
from utils.logger import get_logger

logger = get_logger(__name__)


def build_property_trace(data: PropertyTraceCreate) -> PropertyTrace:
     return PropertyTrace(
          date_sale=data.date_sale,
          name=data.name,
          value=data.value,
          tax=data.tax,
          property_id=data.property_id,
     )


class PropertyTraceService:

     @staticmethod
     def get_all(db: Session) -> list[PropertyTrace]:
          return PropertyTraceRepository(db).list_all()

     @staticmethod
     def get_by_id(db: Session, trace_id: int) -> Optional[PropertyTrace]:
          return PropertyTraceRepository(db).get_by_id(trace_id)

     @staticmethod
     def add(db: Session, data: PropertyTraceCreate) -> Optional[PropertyTrace]:
          """
          Record a sale for an existing property.

          Returns:
               The created PropertyTrace, or None if the property does not exist
          """
          if not PropertyRepository(db).exists(data.property_id):
               logger.info(f"Trace not created: property #{data.property_id} does not exist")
               return None
          return PropertyTraceRepository(db).insert(build_property_trace(data))

     @staticmethod
     def update(db: Session, trace_id: int, data: PropertyTraceUpdate) -> bool:
          """
          Overwrite date, name, value, tax and property of a trace.

          Returns:
               False if the trace or the new property does not exist
          """
          repo = PropertyTraceRepository(db)
          if not repo.exists(trace_id):
               return False
          if not PropertyRepository(db).exists(data.property_id):
               logger.info(f"Trace #{trace_id} not updated: property #{data.property_id} does not exist")
               return False

          return repo.update(trace_id, {
               "date_sale": data.date_sale,
               "name": data.name,
               "value": data.value,
               "tax": data.tax,
               "property_id": data.property_id,
          })

     @staticmethod
     def delete(db: Session, trace_id: int) -> bool:
          return PropertyTraceRepository(db).delete(trace_id)
