"""
Property Image Service - uploaded photos attached to properties.
"""
from typing import Optional
from sqlalchemy.orm import Session

from models import PropertyImage
from repositories import PropertyRepository, PropertyImageRepository
from schemas.property_image import PropertyImageCreate, PropertyImageUpdate
from utils.logger import get_logger

logger = get_logger(__name__)


def build_property_image(data: PropertyImageCreate, file: Optional[bytes] = None) -> PropertyImage:
     return PropertyImage(
          property_id=data.property_id,
          enabled=data.enabled,
          file=file,
     )


class PropertyImageService:

     @staticmethod
     def get_all(db: Session) -> list[PropertyImage]:
          return PropertyImageRepository(db).list_all()

     @staticmethod
     def get_by_id(db: Session, image_id: int) -> Optional[PropertyImage]:
          return PropertyImageRepository(db).get_by_id(image_id)

     @staticmethod
     def add(db: Session, data: PropertyImageCreate, file: Optional[bytes] = None) -> Optional[PropertyImage]:
          """
          Attach an image to an existing property.

          Returns:
               The created PropertyImage, or None if the property does not exist
          """
          if not PropertyRepository(db).exists(data.property_id):
               logger.info(f"Image not created: property #{data.property_id} does not exist")
               return None
          return PropertyImageRepository(db).insert(build_property_image(data, file))

     @staticmethod
     def update(db: Session, image_id: int, data: PropertyImageUpdate) -> bool:
          """
          Change the enabled flag of an image.

          The owning property and the file itself are not touched.
          """
          return PropertyImageRepository(db).update(image_id, {"enabled": data.enabled})

     @staticmethod
     def delete(db: Session, image_id: int) -> bool:
          return PropertyImageRepository(db).delete(image_id)
