"""
Property Service - business logic for property records and search.

Creating or re-assigning a property checks that the owner exists first,
so a missing owner comes back as a plain failure instead of a database
constraint error.
"""
from typing import Optional
from sqlalchemy.orm import Session

from models import Property, PropertyImage, PropertyTrace
from repositories import (
     OwnerRepository,
     PropertyRepository,
     PropertyImageRepository,
     PropertyTraceRepository,
)
from schemas.property import PropertyCreate, PropertyUpdate, PropertyFilter
from utils.logger import get_logger

logger = get_logger(__name__)


def build_property(data: PropertyCreate) -> Property:
     """Construct a Property from validated input, field by field."""
     return Property(
          name=data.name,
          address=data.address,
          price=data.price,
          code_internal=data.code_internal,
          year=data.year,
          owner_id=data.owner_id,
     )


class PropertyService:
     """Service class for property-related business logic."""

     @staticmethod
     def get_all(db: Session) -> list[Property]:
          return PropertyRepository(db).list_all()

     @staticmethod
     def get_by_id(db: Session, property_id: int) -> Optional[Property]:
          return PropertyRepository(db).get_by_id(property_id)

     @staticmethod
     def add(db: Session, data: PropertyCreate) -> Optional[Property]:
          """
          Create a property for an existing owner.

          Args:
               db: SQLAlchemy database session
               data: Validated property fields

          Returns:
               The created Property, or None if the owner does not exist
          """
          if not OwnerRepository(db).exists(data.owner_id):
               logger.info(f"Property not created: owner #{data.owner_id} does not exist")
               return None
          return PropertyRepository(db).insert(build_property(data))

     @staticmethod
     def update(db: Session, property_id: int, data: PropertyUpdate) -> bool:
          """
          Overwrite every field of a property, owner included.

          Returns:
               False if the property or the new owner does not exist
          """
          repo = PropertyRepository(db)
          if not repo.exists(property_id):
               return False
          if not OwnerRepository(db).exists(data.owner_id):
               logger.info(f"Property #{property_id} not updated: owner #{data.owner_id} does not exist")
               return False

          return repo.update(property_id, {
               "name": data.name,
               "address": data.address,
               "price": data.price,
               "code_internal": data.code_internal,
               "year": data.year,
               "owner_id": data.owner_id,
          })

     @staticmethod
     def delete(db: Session, property_id: int) -> bool:
          """Delete a property together with its images and traces."""
          return PropertyRepository(db).delete(property_id)

     @staticmethod
     def filter(
          db: Session,
          criteria: PropertyFilter,
          case_sensitive: Optional[bool] = None
     ) -> list[Property]:
          """
          Search properties by price range, build year and name substring.

          Criteria combine with AND; an empty filter returns every property.
          Results are ordered by id.
          """
          return PropertyRepository(db).search(criteria, case_sensitive)

     @staticmethod
     def get_images(db: Session, property_id: int) -> Optional[list[PropertyImage]]:
          """Images of a property, or None if the property does not exist."""
          if not PropertyRepository(db).exists(property_id):
               return None
          return PropertyImageRepository(db).list_by_property(property_id)

     @staticmethod
     def get_traces(db: Session, property_id: int) -> Optional[list[PropertyTrace]]:
          """Sale history of a property, or None if the property does not exist."""
          if not PropertyRepository(db).exists(property_id):
               return None
          return PropertyTraceRepository(db).list_by_property(property_id)
